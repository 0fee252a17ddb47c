from __future__ import annotations

"""Reusable UI components for the translator window."""

import flet as ft


def section_header(title: str) -> ft.Text:
    """Create a styled section header."""
    return ft.Text(title, size=14, weight=ft.FontWeight.BOLD, color="#1976D2")


def text_area(
    label: str | None = None,
    read_only: bool = False,
    min_lines: int = 8,
    max_lines: int = 12,
) -> ft.TextField:
    """Create a multiline text area for input or results."""
    return ft.TextField(
        label=label,
        multiline=True,
        read_only=read_only,
        min_lines=min_lines,
        max_lines=max_lines,
        expand=True,
        text_size=13,
    )


def language_dropdown(
    label: str,
    languages: dict[str, str],
    value: str,
    width: int = 240,
) -> ft.Dropdown:
    """Create a dropdown keyed by language code, showing display names."""
    return ft.Dropdown(
        label=label,
        value=value,
        options=[
            ft.DropdownOption(key=code, text=name)
            for name, code in languages.items()
        ],
        width=width,
    )


def char_count_label(count: int = 0) -> ft.Text:
    """Create a character count label."""
    return ft.Text(
        format_char_count(count),
        size=12,
        color="#757575",
    )


def format_char_count(count: int) -> str:
    return f"{count:,} characters" if count else "No content"
