import logging
import os
from pathlib import Path

import flet as ft
from dotenv import dotenv_values

from multitranslate.diagnostics.requirements import (
    DOCS_URL,
    blocking_issues,
    check_startup_requirements,
)
from multitranslate.translation import EndpointConfig
from multitranslate.ui.app import TranslatorApp

logger = logging.getLogger(__name__)

# Looked up in the directory the app is started from.
ENV_FILE = Path.cwd() / ".env"


def load_env_file(path: Path) -> None:
    """Copy non-empty values from a .env file into the environment.

    Values in the file replace exported ones so that Re-check picks up edits.
    Blank entries (e.g. an untouched copy of .env.example) are skipped and
    leave the exported value in place.
    """
    if not path.is_file():
        return
    for key, value in dotenv_values(path).items():
        if value and value.strip():
            os.environ[key] = value


class MultiTranslateApp:
    """Top-level shell: gate on startup requirements, then show the translator."""

    def __init__(self, page: ft.Page) -> None:
        self.page = page
        TranslatorApp.configure_page(page)
        self._requirements_dialog: ft.AlertDialog | None = None
        self._requirements_items: ft.Column | None = None

        issues = self._check_requirements()
        if issues:
            self._show_requirements_gate(issues)
            return

        self._show_translator()

    def _check_requirements(self):
        """Reload .env, resolve the endpoint config and return only blocking issues."""
        load_env_file(ENV_FILE)
        self._config = EndpointConfig.from_env()
        issues = check_startup_requirements(self._config)
        for issue in issues:
            if issue.severity == "warning":
                logger.warning("%s: %s", issue.title, issue.details)
        return blocking_issues(issues)

    def _show_translator(self) -> None:
        if self._config.is_custom:
            logger.info("[INFO] Using custom endpoint: %s", self._config.resolved_url)
        TranslatorApp(page=self.page, config=self._config)

    def _show_requirements_gate(self, issues) -> None:
        """Block the app until requirements are satisfied."""
        self.page.controls.clear()
        self.page.add(
            ft.Container(
                expand=True,
                alignment=ft.Alignment.CENTER,
                content=ft.Column(
                    [
                        ft.Text("Multi-Translate", size=28, weight=ft.FontWeight.BOLD),
                        ft.Text(
                            "Checking startup requirements...",
                            size=13,
                            color="#757575",
                        ),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    spacing=6,
                    tight=True,
                ),
            )
        )
        self.page.update()

        self._requirements_items = ft.Column(
            controls=self._build_requirement_controls(issues),
            spacing=6,
        )

        intro = ft.Text(
            "Multi-Translate cannot continue until the configuration below is fixed. "
            f"Edit {ENV_FILE.name} (or the environment) and press Re-check.",
            size=13,
        )

        content = ft.Container(
            width=560,
            content=ft.Column(
                [intro, ft.Divider(height=1), self._requirements_items],
                spacing=10,
                tight=True,
                scroll=ft.ScrollMode.AUTO,
            ),
        )

        self._requirements_dialog = ft.AlertDialog(
            title=ft.Text("Missing requirements", size=18, weight=ft.FontWeight.BOLD),
            content=content,
            actions=[
                ft.TextButton(
                    "Open documentation",
                    on_click=lambda _: self.page.launch_url(DOCS_URL),
                ),
                ft.FilledButton(
                    "Re-check",
                    on_click=self._on_recheck_requirements,
                    style=ft.ButtonStyle(bgcolor="#1976D2", color="white"),
                ),
            ],
            modal=True,
        )
        self.page.show_dialog(self._requirements_dialog)

    def _build_requirement_controls(self, issues) -> list[ft.Control]:
        items: list[ft.Control] = []
        for issue in issues:
            prefix = "[WARNING]" if issue.severity == "warning" else "[ERROR]"
            items.append(ft.Text(f"{prefix} {issue.title}", size=13, weight=ft.FontWeight.W_600))
            items.append(ft.Text(issue.details, size=12, color="#616161"))
        return items

    def _on_recheck_requirements(self, e) -> None:
        issues = self._check_requirements()
        if issues:
            if self._requirements_items is not None:
                self._requirements_items.controls = self._build_requirement_controls(issues)
                self.page.update()
            return

        if self._requirements_dialog is not None:
            self.page.pop_dialog()
        self._show_translator()


def main(page: ft.Page) -> None:
    """Flet app entry point, called by ft.app() with the page."""
    MultiTranslateApp(page)


def run() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    ft.app(main)


if __name__ == "__main__":
    run()
