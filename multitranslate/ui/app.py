"""Translator screen: text in, one request to the translation API, text out."""

from __future__ import annotations

import logging

import flet as ft

from multitranslate.translation import (
    AUTO_DETECT,
    LANGUAGES,
    TARGET_LANGUAGES,
    EmptyInputError,
    EndpointConfig,
    TranslationClient,
    TranslationError,
)
from multitranslate.ui.components import (
    char_count_label,
    format_char_count,
    language_dropdown,
    section_header,
    text_area,
)

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "en"


class TranslatorApp:
    """The single translator window.

    Args:
        page:   Flet Page.
        config: Endpoint configuration. Read from the environment if None.
        client: Translation client. Built from ``config`` if None.
    """

    def __init__(
        self,
        page: ft.Page,
        config: EndpointConfig | None = None,
        client: TranslationClient | None = None,
    ) -> None:
        self.page = page
        self._config = config if config is not None else EndpointConfig.from_env()
        self._client = client or TranslationClient(self._config)

        # Clipboard is a page service (Flet 0.81+).
        self._clipboard = ft.Clipboard()
        page.services.append(self._clipboard)

        self._build_ui()

    # ------------------------------------------------------------------
    # Page setup (called once per app launch, not per screen)
    # ------------------------------------------------------------------

    @staticmethod
    def configure_page(page: ft.Page) -> None:
        page.title = "Multi-Translate"
        page.window.width = 820
        page.window.height = 560
        page.window.min_width = 640
        page.window.min_height = 480
        page.theme_mode = ft.ThemeMode.LIGHT
        page.bgcolor = "#F5F5F5"

    # ------------------------------------------------------------------
    # Build UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        self.page.controls.clear()

        # ── Input + language selection ─────────────────────────────────
        self._input_field = text_area(label="Text to translate")
        self._source_language = language_dropdown("From", LANGUAGES, AUTO_DETECT)
        self._target_language = language_dropdown("To", TARGET_LANGUAGES, DEFAULT_TARGET)

        self._btn_translate = ft.FilledButton(
            "Translate",
            icon=ft.Icons.TRANSLATE,
            on_click=self._on_translate_click,
            style=ft.ButtonStyle(bgcolor="#1976D2", color="white"),
            width=240,
        )

        controls_column = ft.Column(
            [self._source_language, self._target_language, self._btn_translate],
            spacing=10,
        )
        input_row = ft.Row(
            [self._input_field, controls_column],
            vertical_alignment=ft.CrossAxisAlignment.START,
            spacing=10,
        )

        # ── Output ─────────────────────────────────────────────────────
        self._progress_bar = ft.ProgressBar(visible=False, expand=True)
        self._output_field = text_area(read_only=True)
        self._output_char_count = char_count_label()

        # ── Footer ─────────────────────────────────────────────────────
        self._btn_copy = ft.OutlinedButton(
            "Copy Result",
            icon=ft.Icons.COPY,
            on_click=self._on_copy_click,
        )
        self._status_text = ft.Text("", size=12, color="#757575", expand=True)
        if self._config.is_custom:
            self._status_text.value = f"Using custom endpoint: {self._config.resolved_url}"

        footer = ft.Row(
            [self._btn_copy, self._status_text, self._output_char_count],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=10,
        )

        # ── Assemble ──────────────────────────────────────────────────
        self.page.add(
            ft.Column(
                [
                    section_header("Input"),
                    input_row,
                    ft.Divider(height=1),
                    section_header("Translation"),
                    self._progress_bar,
                    self._output_field,
                    footer,
                ],
                spacing=10,
                expand=True,
            )
        )
        self.page.update()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    async def _on_translate_click(self, e) -> None:
        await self.translate_current_input()

    async def _on_copy_click(self, e) -> None:
        text = self._output_field.value or ""
        await self._clipboard.set(text)
        if text:
            self._show_snackbar("Copied to clipboard")

    # ------------------------------------------------------------------
    # Core processing
    # ------------------------------------------------------------------

    async def translate_current_input(self) -> None:
        """Translate whatever is in the input box and show the result."""
        text = (self._input_field.value or "").strip()
        if not text:
            self._show_dialog("Empty input", EmptyInputError().args[0])
            return

        source = self._source_language.value or AUTO_DETECT
        target = self._target_language.value or DEFAULT_TARGET

        self._set_processing(True)
        self._set_status("Translating...")
        self._set_output("")

        try:
            result = await self._client.translate(text, source, target)
            self._set_output(result)
            self._set_status("Done.")
        except TranslationError as exc:
            logger.warning("Translation failed (%s): %s", exc.kind.value, exc)
            self._report_failure(str(exc))
        except Exception as exc:
            logger.exception("Unexpected translation failure")
            self._report_failure(str(exc))
        finally:
            self._set_processing(False)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _report_failure(self, msg: str) -> None:
        self._set_output("")
        self._set_status("Error: " + msg)
        self._show_dialog("Error", "Translation failed:\n" + msg)

    def _set_processing(self, active: bool) -> None:
        self._btn_translate.disabled = active
        self._progress_bar.visible = active
        self.page.update()

    def _set_status(self, msg: str) -> None:
        self._status_text.value = msg
        self.page.update()

    def _set_output(self, text: str) -> None:
        self._output_field.value = text
        self._output_char_count.value = format_char_count(len(text))
        self.page.update()

    def _show_dialog(self, title: str, msg: str) -> None:
        dialog = ft.AlertDialog(
            title=ft.Text(title),
            content=ft.Text(msg),
            actions=[
                ft.FilledButton("OK", on_click=lambda _: self.page.pop_dialog()),
            ],
            modal=True,
        )
        self.page.show_dialog(dialog)
        self.page.update()

    def _show_snackbar(self, msg: str) -> None:
        self.page.show_dialog(ft.SnackBar(content=ft.Text(msg)))
        self.page.update()
