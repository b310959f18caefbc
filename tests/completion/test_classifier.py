"""Tests for the tasks.toml location classifier."""

import pytest

from tskdocs.completion.classifier import RULES, Location, classify


class TestClassify:
    @pytest.mark.parametrize(
        ("context", "line_prefix", "expected"),
        [
            ("[tasks]", "", Location.TASK_NAME_ROOT),
            ("[tasks]\n[tasks.build]", "", Location.TASK_NAME_ROOT),  # first rule wins
            ("[tasks.build]", "", Location.INSIDE_TASK_BODY),
            ('[tasks.build]\ncmds = ["make"]\n', "", Location.INSIDE_TASK_BODY),
            ("", "[tasks.te", Location.INSIDE_TASK_BODY),
            ("", "   [tasks.te", Location.INSIDE_TASK_BODY),
            ("", "", Location.DOCUMENT_ROOT),
            ('dotenv = ".env"\n', "en", Location.DOCUMENT_ROOT),
            ("[env]\n", "", Location.DOCUMENT_ROOT),
        ],
    )
    def test_locations(self, context: str, line_prefix: str, expected: Location) -> None:
        assert classify(context, line_prefix) is expected

    def test_line_prefix_defaults_to_empty(self) -> None:
        assert classify("[tasks]") is Location.TASK_NAME_ROOT

    def test_task_list_root_never_produced_by_rules(self) -> None:
        assert Location.TASK_LIST_ROOT not in {location for _, location in RULES}

    def test_location_values(self) -> None:
        assert Location.INSIDE_TASK_BODY == "inside_task_body"
