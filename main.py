#!/usr/bin/env python3
"""
DFM command line runner.

Evaluates input strings against the reference machine and prints one line
per input. With no input, the example strings from configuration are used.

Usage:
    python main.py [INPUT ...] [--config config/dfm.yaml] [--log-level DEBUG]
"""

import argparse
import sys
from typing import List, Optional, Tuple

import yaml

from dfm.adapter import InputAdapter
from dfm.config import load_settings
from dfm.evaluator import DFMEvaluator
from dfm.exceptions import DFMError
from dfm.logging_config import get_logger, setup_logging
from dfm.models import AutomatonDefinition
from dfm.reference import make_reference_dfm

log = get_logger("dfm.main")


class DFMRunnerSystem:
    def __init__(self, definition: Optional[AutomatonDefinition] = None):
        self.definition = definition if definition is not None else make_reference_dfm()
        self.evaluator = DFMEvaluator()
        self.adapter = InputAdapter(self.definition)
        log.debug(
            "system_initialized",
            states=len(self.definition.states),
            alphabet=len(self.definition.alphabet),
            total=self.definition.is_total,
        )

    def run(self, text: str) -> Tuple[bool, str]:
        """
        Evaluate one raw input string.
        Returns (evaluated, line): evaluated is False when the input was
        invalid or the machine got stuck.
        """
        try:
            symbols = self.adapter.parse(text)
            result = self.evaluator.evaluate(self.definition, symbols)
        except DFMError as e:
            log.warning("input_failed", input=text, error_type=type(e).__name__, error=str(e))
            return False, self.adapter.render_error(text, e)

        log.info(
            "input_evaluated",
            input=text,
            verdict=result.verdict.value,
            final_state=result.final_state,
            consumed=result.consumed,
        )
        return True, self.adapter.render(symbols, result)

    def run_all(self, inputs: List[str]) -> bool:
        all_ok = True
        for text in inputs:
            ok, line = self.run(text)
            print(line)
            all_ok = all_ok and ok
        return all_ok


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run input strings through a deterministic finite machine")
    parser.add_argument("inputs", nargs="*", help="Input strings over the machine alphabet (default: configured examples)")
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to a dfm.yaml settings file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
        if args.log_level:
            settings = settings.model_copy(update={"log_level": args.log_level})
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 1

    setup_logging(
        log_dir=settings.log_dir,
        log_level=settings.log_level,
        console_output=settings.console_output,
    )

    inputs = args.inputs or settings.examples
    log.info("run_started", inputs=len(inputs), from_config=not args.inputs)

    system = DFMRunnerSystem()
    return 0 if system.run_all(inputs) else 1


if __name__ == "__main__":
    sys.exit(main())
