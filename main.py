from __future__ import annotations

import argparse
import sys
from typing import List

from pagesim.reference import parse_policy_selection, parse_reference_string
from pagesim.report import ReportConfig, TraceReport
from pagesim.scenarios import SCENARIO_BY_KEY, SCENARIOS, ScenarioRecipe, get_scenario
from pagesim.simulator import POLICY_NAMES, Simulator

# constant setup
DEFAULT_FRAME_CAPACITY = 3
TOTAL_SCENARIOS = len(SCENARIOS)


def display_scenario_menu() -> None:
    print("\n" + "=" * 60)
    print("Page Replacement Simulator - Scenario Selection")
    print("=" * 60)

    for idx, recipe in enumerate(SCENARIOS, 1):
        stream = ",".join(str(page) for page in recipe.reference_stream)
        print(f"\n{idx}. {recipe.key}  frames={recipe.frame_capacity}  refs={stream}")
        print(f"   {recipe.goal}")

    print("\n" + "-" * 60)
    print(f"Pick scenarios by number (1-{TOTAL_SCENARIOS}) or key, e.g. '1 single-frame'.")
    print("Press Enter to run every scenario:")


def select_scenarios(user_input: str) -> List[ScenarioRecipe]:
    """Resolve menu input to recipes in the order typed; blank or nothing valid means all."""
    chosen: List[ScenarioRecipe] = []
    for token in user_input.replace(",", " ").split():
        if token.isdigit() and 1 <= int(token) <= TOTAL_SCENARIOS:
            recipe = SCENARIOS[int(token) - 1]
        elif token in SCENARIO_BY_KEY:
            recipe = SCENARIO_BY_KEY[token]
        else:
            print(f"Warning: no scenario '{token}', ignoring.")
            continue
        if recipe not in chosen:
            chosen.append(recipe)

    if not chosen:
        return list(SCENARIOS)
    return chosen


def prompt_for_scenarios() -> List[ScenarioRecipe]:
    display_scenario_menu()
    try:
        return select_scenarios(input("> "))
    except (EOFError, KeyboardInterrupt):
        print("\nCancelled.")
        return []


def run_simulation(
    frame_capacity: int,
    reference_stream: List[int],
    policies: List[str],
    *,
    scenario_name: str = "custom",
    show_steps: bool = True,
) -> str:
    simulator = Simulator(frame_capacity, reference_stream)
    traces = simulator.run_all(policies)
    config = ReportConfig(
        frame_capacity=frame_capacity,
        reference_stream=reference_stream,
        scenario_name=scenario_name,
        show_steps=show_steps,
    )
    return TraceReport(config).build_report(traces)


def parse_arguments(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Page replacement simulator - FIFO, LRU, OPT and Clock",
        epilog=(
            "Examples:\n"
            "  python main.py -f 3 -r 7,0,1,2,0,3,0,4     # all policies\n"
            "  python main.py -f 3 -r 1,2,3,4 -p LRU OPT  # selected policies\n"
            "  python main.py -s belady-anomaly           # built-in scenario\n"
            "  python main.py                             # interactive menu"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-f", "--frames", type=int, default=None, help=f"Number of frames (default {DEFAULT_FRAME_CAPACITY})")
    parser.add_argument("-r", "--reference", default=None, help="Reference string, comma or space separated page numbers")
    parser.add_argument(
        "-p",
        "--policies",
        nargs="+",
        default=list(POLICY_NAMES),
        help=f"Policies to run: {', '.join(POLICY_NAMES)} (default: all)",
    )
    parser.add_argument("-s", "--scenario", default=None, help="Run a built-in scenario by key")
    parser.add_argument("--summary-only", action="store_true", help="Skip the per-step tables")
    parser.add_argument("--list", action="store_true", help="List built-in scenarios and exit")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> None:
    args = parse_arguments(sys.argv[1:] if argv is None else argv)

    if args.list:
        for recipe in SCENARIOS:
            print(f"{recipe.key:<22} frames={recipe.frame_capacity}  {recipe.goal}")
        return

    policies, rejected = parse_policy_selection(args.policies)
    for token in rejected:
        print(f"Warning: unknown policy '{token}', ignoring.")
    if not policies:
        print(f"Error: select at least one policy from {', '.join(POLICY_NAMES)}")
        sys.exit(1)

    if args.frames is not None and args.frames < 0:
        print("Error: frame count must be a non-negative integer")
        sys.exit(1)

    show_steps = not args.summary_only

    if args.reference is not None:
        frame_capacity = DEFAULT_FRAME_CAPACITY if args.frames is None else args.frames
        reference_stream = parse_reference_string(args.reference)
        print(run_simulation(frame_capacity, reference_stream, policies, show_steps=show_steps))
        return

    if args.scenario is not None:
        try:
            recipes = [get_scenario(args.scenario)]
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        recipes = prompt_for_scenarios()
        if not recipes:
            return

    for recipe in recipes:
        frame_capacity = recipe.frame_capacity if args.frames is None else args.frames
        print(f"\n{'=' * 60}")
        print(f"Running Scenario: {recipe.key}")
        print(f"{'=' * 60}\n")
        print(
            run_simulation(
                frame_capacity,
                list(recipe.reference_stream),
                policies,
                scenario_name=recipe.key,
                show_steps=show_steps,
            )
        )


if __name__ == "__main__":
    main()
