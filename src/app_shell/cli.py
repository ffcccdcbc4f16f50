import argparse
import logging
import sys
from pathlib import Path

from src.adapters.clock import SystemClock
from src.adapters.host_platform import HostPlatform
from src.components.people import DeriveInput, TodayPort, run_derive
from src.components.report import ReportInput, ReportOutput, TextStreamPort, run_report
from src.domain.entities import Person
from src.domain.sample_data import SAMPLE_PEOPLE
from src.ports.platform import PlatformPort
from src.rules.loader import load_rules
from src.rules.models import Rules, default_rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: Path) -> Rules:
    """Load rules from path, or the built-in defaults if the file is absent."""
    if not path.exists():
        return default_rules()
    return load_rules(path)


def run(
    rules: Rules,
    *,
    people: tuple[Person, ...],
    clock: TodayPort,
    platform: PlatformPort,
    stream: TextStreamPort,
) -> ReportOutput:
    derived = run_derive(
        DeriveInput(people=people),
        clock=clock,
        base_url=rules.avatar.base_url,
    )
    return run_report(
        ReportInput(
            platform=platform.name(),
            ids=derived.ids,
            ages=derived.ages,
            avatars=derived.avatars,
            prefix=rules.report.prefix,
        ),
        stream=stream,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print ages and avatar URLs for the sample people."
    )
    parser.parse_args(argv)

    rules_path = Path(RULES_PATH)
    try:
        rules = get_rules(rules_path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, rules.logging.level))
    if rules_path.exists():
        logger.info(f"Loaded rules from {rules_path}.")
    else:
        logger.info(f"Rules file {rules_path} not found, using defaults.")

    run(
        rules,
        people=SAMPLE_PEOPLE,
        clock=SystemClock(rules.clock.tz_name),
        platform=HostPlatform(),
        stream=sys.stdout,
    )


if __name__ == "__main__":
    main()
