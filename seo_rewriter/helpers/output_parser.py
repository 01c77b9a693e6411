"""LLM output parser for the rewrite reply.

This module provides tolerant parsing of the model's JSON reply:
- JSON extraction from code blocks
- Deterministic fixes for common JSON issues (trailing commas)
- Format detection for replies that are not JSON objects

A reply only counts as parsed when it decodes to a JSON object. Arrays,
strings and numbers take the same fallback path as undecodable text.
"""

import json
import re

from .schemas import ParseResult


class OutputParser:
    """LLM output parser."""

    _JSON_BLOCK_PATTERN = re.compile(
        r"```json\s*\n(.*?)\n```",
        re.DOTALL,
    )
    _GENERIC_BLOCK_PATTERN = re.compile(
        r"```\s*\n(.*?)\n```",
        re.DOTALL,
    )

    _MARKDOWN_PATTERNS = [
        re.compile(r"^#{1,3}\s", re.MULTILINE),  # H1-H3
        re.compile(r"^[*-]\s", re.MULTILINE),  # Unordered list
        re.compile(r"^\d+\.\s", re.MULTILINE),  # Ordered list
    ]
    _HTML_PATTERN = re.compile(r"<(p|h[1-6]|ul|ol|li|div|section|article)[\s>]", re.I)

    _TRAILING_COMMA_OBJ = re.compile(r",\s*}")
    _TRAILING_COMMA_ARR = re.compile(r",\s*]")

    def parse_json(self, content: str) -> ParseResult:
        """
        Parse the reply as a JSON object (with code block support).

        Processing flow:
        1. Remove code block markers (```json ... ``` or ``` ... ```)
        2. Attempt JSON parse
        3. On failure, apply deterministic fixes and retry the parse
        4. Return ParseResult (success only for JSON objects)

        Args:
            content: Raw LLM output content

        Returns:
            ParseResult: Parse result (success/failure, data, applied fixes)
        """
        fixes_applied: list[str] = []

        extracted, was_extracted = self._extract_from_code_block(content)
        if was_extracted:
            fixes_applied.append("code_block_removed")

        data = self._loads_object(extracted)
        if data is not None:
            return ParseResult(
                success=True,
                data=data,
                raw=content,
                format_detected="json",
                fixes_applied=fixes_applied,
            )

        fixed, fix_names = self.apply_deterministic_fixes(extracted)
        if fixed is not None:
            data = self._loads_object(fixed)
            if data is not None:
                fixes_applied.extend(fix_names)
                return ParseResult(
                    success=True,
                    data=data,
                    raw=content,
                    format_detected="json",
                    fixes_applied=fixes_applied,
                )

        return ParseResult(
            success=False,
            data=None,
            raw=content,
            format_detected=self.detect_format(content),
            fixes_applied=fixes_applied,
        )

    @staticmethod
    def _loads_object(text: str) -> dict | None:
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError):
            return None
        return data if isinstance(data, dict) else None

    def _extract_from_code_block(self, content: str) -> tuple[str, bool]:
        """
        Extract content from code block.

        Returns:
            tuple[str, bool]: (extracted content, whether extraction occurred)
        """
        match = self._JSON_BLOCK_PATTERN.search(content)
        if match:
            return match.group(1).strip(), True

        match = self._GENERIC_BLOCK_PATTERN.search(content)
        if match:
            return match.group(1).strip(), True

        return content.strip(), False

    def apply_deterministic_fixes(self, content: str) -> tuple[str | None, list[str]]:
        """
        Apply deterministic fixes.

        Allowed fixes:
        - Trailing comma removal: ,} -> }, ,] -> ]

        Value guessing or structure changes are never attempted.

        Args:
            content: JSON string to fix

        Returns:
            tuple[str | None, list[str]]: (fixed string or None, list of applied fix names)
        """
        fixed = content
        changed = False

        if self._TRAILING_COMMA_OBJ.search(fixed):
            fixed = self._TRAILING_COMMA_OBJ.sub("}", fixed)
            changed = True

        if self._TRAILING_COMMA_ARR.search(fixed):
            fixed = self._TRAILING_COMMA_ARR.sub("]", fixed)
            changed = True

        if changed:
            return fixed, ["trailing_comma_removed"]
        return None, []

    def detect_format(self, content: str) -> str:
        """Classify a reply that did not parse: html, markdown or unknown."""
        if self._HTML_PATTERN.search(content):
            return "html"
        for pattern in self._MARKDOWN_PATTERNS:
            if pattern.search(content):
                return "markdown"
        return "unknown"
