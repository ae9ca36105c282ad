"""Core pairing demonstration logic.

Builds two people (or one person and a plain string), pairs them through
the catch-and-print helper and reports the outcome. Scripts are thin
wrappers; this is the real implementation.
"""

import sys
import json
import logging
import argparse
from typing import Optional, Dict, Any, Sequence

from pairing.person import Person
from pairing.schemas import resolve_config, ParamConfig, CLIConfig, InternalConfig


logger = logging.getLogger(__name__)


def setup_logging(config: InternalConfig) -> None:
    """Configure the root logger with a console handler.

    Existing root handlers are removed so repeated runs in one process do
    not duplicate output. Level comes from ``config.logging.level``.
    """
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    logger.debug("Logging: level=%s", logging.getLevelName(log_level))


def run_pairing(
    first: str,
    second: str,
    not_a_person: bool = False,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> bool:
    """Run the pairing demonstration.

    Parameters
    ----------
    first : str
        Name of the person doing the pairing.

    second : str
        Name of the partner. Passed as a plain string instead of a Person
        when ``not_a_person`` is True, which triggers PairingError.

    cli_args : dict, optional
        Settings overrides. Keys: policy, log_level. All optional.

    verbose : bool, optional
        If True, enable DEBUG logging and print the resolved settings.

    Returns
    -------
    bool
        True if the pairing succeeded, False if it was refused.

    Raises
    ------
    pydantic.ValidationError
        If ``cli_args`` fails validation.
    """
    cli_args = dict(cli_args or {})
    if verbose and cli_args.get("log_level") is None:
        cli_args["log_level"] = "DEBUG"

    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(ParamConfig(), cli_cfg)
    setup_logging(config)

    person = Person(first, policy=config.policy)
    partner = second if not_a_person else Person(second, policy=config.policy)

    print(f"\n{'='*60}")
    print("Pairing")
    print('='*60)
    print(f"Person:  {person.name}")
    print(f"Partner: {partner!r}")
    print(f"Policy:  {config.policy}")
    print('='*60)

    if verbose:
        print("\nFull Internal Configuration:")
        print(json.dumps(config.model_dump(), indent=2))
        print('='*60)

    ok = person.get_married(partner)

    if ok:
        print(f"{person.name} and {partner.name} are now partners")
    else:
        logger.info("%s is still %s", person.name,
                    "unpaired" if person.partner is None else f"holding {person.partner!r}")

    return ok


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Pair two people and report the outcome")
    parser.add_argument("first", help="Name of the first person")
    parser.add_argument("second", help="Name of the partner")
    parser.add_argument("--not-a-person", action="store_true",
                        help="Pass the partner as a plain string (raises PairingError)")
    parser.add_argument("--policy", choices=["transactional", "asymmetric"],
                        help="Failure policy for pair()")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Override log level")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    ok = run_pairing(
        args.first,
        args.second,
        not_a_person=args.not_a_person,
        cli_args={"policy": args.policy, "log_level": args.log_level},
        verbose=args.verbose,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
