"""Scenario-based tests and command-line driver tests."""

import pytest

import main
from pagesim import Simulator
from pagesim.scenarios import SCENARIOS, get_scenario


class TestScenarios:
    """Each built-in scenario reproduces its known fault counts."""

    @pytest.mark.parametrize("recipe", SCENARIOS, ids=lambda r: r.key)
    def test_expected_faults(self, recipe):
        traces = Simulator(recipe.frame_capacity, recipe.reference_stream).run_all(recipe.expected_faults)
        for policy, expected in recipe.expected_faults.items():
            assert traces[policy].fault_count == expected, f"{recipe.key}/{policy}"

    def test_opt_beats_lru_on_anomaly_string(self):
        recipe = get_scenario("belady-anomaly")
        simulator = Simulator(recipe.frame_capacity, recipe.reference_stream)
        assert simulator.run("OPT").fault_count < simulator.run("LRU").fault_count

    def test_unknown_scenario(self):
        with pytest.raises(ValueError, match="Unknown scenario"):
            get_scenario("nope")


class TestCommandLine:
    """Test main.py argument handling."""

    def test_reference_string(self, capsys):
        main.main(["-f", "3", "-r", "1,2,3,1", "-p", "FIFO", "--summary-only"])
        out = capsys.readouterr().out
        assert "[Policy: FIFO]" in out
        assert "- Page Faults: 3" in out
        assert "[FIFO Steps]" not in out

    def test_default_runs_all_policies(self, capsys):
        main.main(["-r", "1 2 3 4"])
        out = capsys.readouterr().out
        for name in ("FIFO", "LRU", "OPT", "Clock"):
            assert f"[{name} Steps]" in out

    def test_scenario(self, capsys):
        main.main(["-s", "single-frame", "-p", "Clock"])
        out = capsys.readouterr().out
        assert "Running Scenario: single-frame" in out
        assert "- Page Faults: 4" in out

    def test_unknown_policy_warns(self, capsys):
        main.main(["-r", "1,2", "-p", "LRU", "MRU", "--summary-only"])
        out = capsys.readouterr().out
        assert "Warning: unknown policy 'MRU'" in out
        assert "[Policy: LRU]" in out

    def test_no_valid_policy_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["-r", "1,2", "-p", "MRU"])
        assert exc.value.code == 1

    def test_unknown_scenario_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["-s", "missing"])
        assert exc.value.code == 1
        assert "Error: Unknown scenario" in capsys.readouterr().out

    def test_negative_frames_exits(self):
        with pytest.raises(SystemExit):
            main.main(["-f", "-1", "-r", "1"])

    def test_list(self, capsys):
        main.main(["--list"])
        out = capsys.readouterr().out
        assert "belady-classic" in out

    def test_interactive_selection(self, capsys, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda _prompt="": "3")
        main.main(["--summary-only"])
        out = capsys.readouterr().out
        assert "Running Scenario: single-frame" in out
        assert "Running Scenario: belady-classic" not in out

    def test_interactive_cancel(self, capsys, monkeypatch):
        def raise_eof(_prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)
        main.main([])
        assert "Cancelled." in capsys.readouterr().out

    def test_interactive_selection_by_key(self, capsys, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda _prompt="": "clock-second-chance")
        main.main(["-p", "Clock", "--summary-only"])
        out = capsys.readouterr().out
        assert "Running Scenario: clock-second-chance" in out
        assert "- Page Faults: 5" in out

    def test_select_scenarios_blank_runs_all(self):
        assert main.select_scenarios("") == list(SCENARIOS)

    def test_select_scenarios_numbers_and_keys_in_typed_order(self, capsys):
        chosen = main.select_scenarios("4, single-frame 4 9 x")
        assert [recipe.key for recipe in chosen] == ["clock-second-chance", "single-frame"]
        out = capsys.readouterr().out
        assert "Warning: no scenario '9'" in out
        assert "Warning: no scenario 'x'" in out

    def test_select_scenarios_nothing_valid_runs_all(self, capsys):
        assert main.select_scenarios("0 nope") == list(SCENARIOS)
