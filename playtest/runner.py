#!/usr/bin/env python3
"""Playtest runner: replays scripted command lists and records the outcome."""

import argparse
import json
import os
import sys
from datetime import datetime

import yaml

from nerdcave.engine import GameEngine
from nerdcave.errors import ConfigError
from nerdcave.log import TranscriptLogger, configure_logging
from nerdcave.narration import Style
from nerdcave.settings import load_settings

OUTCOMES = ("won", "lost", "none")


def load_scripts(scripts_file: str) -> list[dict]:
    try:
        with open(scripts_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read scripts file {scripts_file}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {scripts_file}: {e}") from e

    scripts = data.get("scripts", []) if isinstance(data, dict) else None
    if not isinstance(scripts, list):
        raise ConfigError(f"{scripts_file} must contain a 'scripts' list.")

    for i, entry in enumerate(scripts):
        if not isinstance(entry, dict) or not isinstance(entry.get("commands"), list):
            raise ConfigError(f"Script #{i + 1} in {scripts_file} needs a 'commands' list.")
        entry.setdefault("name", f"script-{i + 1}")
        expect = entry.get("expect")
        if expect is not None and expect not in OUTCOMES:
            raise ConfigError(f"Script '{entry['name']}': expect must be one of {', '.join(OUTCOMES)}.")
    return scripts


def outcome_of(engine: GameEngine) -> str:
    if engine.is_won():
        return "won"
    if engine.is_lost():
        return "lost"
    return "none"


def run_script(script: dict, log: TranscriptLogger) -> dict:
    engine = GameEngine()

    log.log(f"=== Playtest: {script['name']} ===")
    log.log()
    for line in engine.start():
        log.log(f"  {line.text}")

    errors = 0
    for turn, command in enumerate(script["commands"], 1):
        narration = engine.execute(str(command))
        errors += narration.styles().count(Style.ERROR)
        log.log(f"[Turn {turn}] > {command}")
        for line in narration:
            log.log(f"  {line.text}")

    outcome = outcome_of(engine)
    expect = script.get("expect")
    passed = expect is None or expect == outcome

    log.log()
    log.log("=== Results ===")
    log.log(f"  Outcome:  {outcome}")
    log.log(f"  Expected: {expect or '-'}")
    log.log(f"  Passed:   {passed}")
    log.log(f"  Log:      {log.path}")

    return {
        "name": script["name"],
        "outcome": outcome,
        "expect": expect,
        "passed": passed,
        "turns": len(script["commands"]),
        "error_lines": errors,
        "state": engine.get_state(),
        "timestamp": datetime.now().isoformat(),
    }


def write_result(log_dir: str, result: dict) -> str:
    safe = result["name"].replace(" ", "_").replace("/", "_")
    path = os.path.join(log_dir, f"{safe}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2)
    return path


def print_summary(results: list[dict]):
    print(f"\n{'='*64}")
    print("  PLAYTEST SUMMARY")
    print(f"{'='*64}")
    print(f"  {'Script':<28} {'Outcome':<8} {'Expect':<8} {'Turns':<6} {'OK':<4}")
    print(f"  {'-'*28} {'-'*8} {'-'*8} {'-'*6} {'-'*4}")
    for r in results:
        ok = "YES" if r["passed"] else "NO"
        print(f"  {r['name']:<28} {r['outcome']:<8} {r['expect'] or '-':<8} {r['turns']:<6} {ok:<4}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Replay scripted playthroughs of Nerd Cave")
    parser.add_argument("scripts_file", nargs="?", default=None, help="Path to a scripts YAML file")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--log-dir", default=None, help="Directory for transcripts and JSON results")
    parser.add_argument("--quiet", action="store_true", help="Only print the summary")
    args = parser.parse_args(argv)

    project_root = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..")
    if args.scripts_file is None:
        args.scripts_file = os.path.join(project_root, "walkthrough.yaml")

    try:
        settings = load_settings(args.config)
        scripts = load_scripts(args.scripts_file)
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    log_dir = args.log_dir or settings.log_dir
    os.makedirs(log_dir, exist_ok=True)

    if not scripts:
        print(f"ERROR: No scripts found in {args.scripts_file}")
        sys.exit(1)

    results = []
    for script in scripts:
        with TranscriptLogger(log_dir, script["name"], echo=not args.quiet) as log:
            result = run_script(script, log)
        write_result(log_dir, result)
        results.append(result)

    print_summary(results)
    if not all(r["passed"] for r in results):
        sys.exit(1)


if __name__ == "__main__":
    main()
