# tests/unit_tests/test_prompts_unit.py
from unittest.mock import patch

import pytest

from tracker.controllers.utils import is_valid_salary
from tracker.records import Choice
from tracker.views.prompts import NO_MANAGER, ask_choice, ask_text


def test_ask_text_without_validator_accepts_anything():
    with patch("tracker.views.prompts.Prompt.ask", return_value="") as mock_ask:
        assert ask_text("What is the name of the new department?") == ""
        assert mock_ask.call_count == 1


def test_ask_text_reprompts_until_valid(capsys):
    with patch("tracker.views.prompts.Prompt.ask", side_effect=["abc", "95000"]) as mock_ask:
        answer = ask_text(
            "What is the salary of this new role?",
            validator=is_valid_salary,
            error_message="Please enter a valid number",
        )
    assert answer == "95000"
    assert mock_ask.call_count == 2
    # Same question both times
    assert mock_ask.call_args_list[0].args == mock_ask.call_args_list[1].args
    assert "Please enter a valid number" in capsys.readouterr().out


def test_ask_text_accepts_decimal_salary():
    with patch("tracker.views.prompts.Prompt.ask", return_value="95000.50"):
        assert ask_text("Salary?", validator=is_valid_salary) == "95000.50"


def test_ask_choice_returns_value_of_picked_label(capsys):
    choices = [Choice("Engineer", 10), Choice("Senior Engineer", 20)]
    with patch("tracker.views.prompts.Prompt.ask", return_value="2") as mock_ask:
        assert ask_choice("What is the employee's role?", choices) == 20
    assert mock_ask.call_args.kwargs["choices"] == ["1", "2"]
    out = capsys.readouterr().out
    assert "1: Engineer" in out
    assert "2: Senior Engineer" in out


def test_ask_choice_none_option_maps_to_null():
    choices = [NO_MANAGER, Choice("Ada Lovelace", 1)]
    with patch("tracker.views.prompts.Prompt.ask", return_value="1"):
        assert ask_choice("Who is the employee's manager?", choices) is None


def test_ask_choice_needs_choices():
    with pytest.raises(ValueError):
        ask_choice("Which department is this role in?", [])
