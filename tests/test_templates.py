"""Tests for rewrite/templates.py: emitted Go fragments.

Python 3.13+.
"""

from __future__ import annotations

import os
import sys

import pytest

from errorsmith.rewrite import InjectionTemplate, import_block, reference_declarations
from errorsmith.rewrite.templates import go_string_literal


class TestGoStringLiteral:
    """Test Go interpreted string quoting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("main.go", '"main.go"'),
            ('a "b".go', '"a \\"b\\".go"'),
            ("C:\\src\\main.go", '"C:\\\\src\\\\main.go"'),
            ("tab\there", '"tab\\there"'),
            ("line\nbreak", '"line\\nbreak"'),
            ("100%.go", '"100%.go"'),
            ("", '""'),
        ],
    )
    def test_escaping(self, value: str, expected: str) -> None:
        assert go_string_literal(value) == expected

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX surrogateescape file names")
    def test_undecodable_path_bytes_become_byte_escapes(self) -> None:
        """Surrogate-escaped path bytes are emitted as Go \\xNN escapes."""
        literal = go_string_literal(os.fsdecode(b"dir/x\xff\xfe.go"))

        assert literal == '"dir/x\\xff\\xfe.go"'
        assert literal.encode("utf-8") == b'"dir/x\\xff\\xfe.go"'

    def test_valid_utf8_kept_verbatim(self) -> None:
        assert go_string_literal("café.go") == '"café.go"'


class TestInjectionTemplate:
    """Test the probability-gated error block."""

    def test_render_with_trace(self) -> None:
        rendered = InjectionTemplate(denominator=20).render("main.go", 7)

        assert rendered == (
            "if _errorsmith_rand_.Int()%20 == 0 {\n"
            '\t_errorsmith_fmt_.Printf("injected error at %s:%d\\n", "main.go", 7)\n'
            '\terr = _errorsmith_fmt_.Errorf("injected error at %s:%d", "main.go", 7)\n'
            "}\n"
        )

    def test_render_without_trace(self) -> None:
        rendered = InjectionTemplate(denominator=1, trace=False).render("x.go", 1)

        assert rendered == (
            "if _errorsmith_rand_.Int()%1 == 0 {\n"
            '\terr = _errorsmith_fmt_.Errorf("injected error at %s:%d", "x.go", 1)\n'
            "}\n"
        )

    def test_percent_in_filename_stays_an_argument(self) -> None:
        """File names are passed as format arguments, never spliced in."""
        rendered = InjectionTemplate(denominator=2).render("100%d.go", 3)

        assert '"injected error at %s:%d", "100%d.go", 3)' in rendered

    @pytest.mark.parametrize("denominator", [0, -1, -20])
    def test_non_positive_denominator_rejected(self, denominator: int) -> None:
        with pytest.raises(ValueError, match="denominator"):
            InjectionTemplate(denominator=denominator)

    def test_template_is_frozen(self) -> None:
        template = InjectionTemplate(denominator=3)

        with pytest.raises(AttributeError):
            template.denominator = 4  # type: ignore[misc]


class TestFileFragments:
    """Test the import block and the reference declarations."""

    def test_import_block(self) -> None:
        assert import_block() == (
            '\nimport _errorsmith_rand_ "math/rand"\nimport _errorsmith_fmt_ "fmt"\n'
        )

    def test_reference_declarations(self) -> None:
        assert reference_declarations() == (
            "\nvar _ = _errorsmith_rand_.Int\nvar _ = _errorsmith_fmt_.Printf\n"
        )
