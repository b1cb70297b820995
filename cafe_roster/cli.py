"""Command-line interface for the café roster."""

from __future__ import annotations

import argparse
import asyncio
import json
from functools import partial
from pathlib import Path

from cafe_roster.calendar import week_key
from cafe_roster.config import RosterConfig, load_config
from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.db import init_database, open_session
from cafe_roster.history import HistoryStore
from cafe_roster.domain.types import WeeklyRoster
from cafe_roster.engine.orchestrator import UNCHANGED, build_week_schedule, default_scheduler, lock_week
from cafe_roster.io.export_csv import export_load_csv, export_roster_csv, roster_grid
from cafe_roster.io.fetch import IngestionError, fetch_sheet_csv, read_csv_file
from cafe_roster.services.load import cumulative_load, load_frame
from cafe_roster.services.registration_stats import registration_summary
from cafe_roster.session import IngestionSession


def _config(args: argparse.Namespace) -> RosterConfig:
    cfg = load_config(args.config)
    if args.db:
        cfg.db_url = args.db
    return cfg


def _shift_labels(cfg: RosterConfig):
    return {shift: window.label() for shift, window in cfg.shift_times.items()}


def _ingest(args: argparse.Namespace, cfg: RosterConfig) -> IngestionSession:
    """Run one ingestion round trip; exits with status 1 on failure."""
    if getattr(args, "csv", None):
        fetcher = partial(read_csv_file, args.csv)
    elif cfg.sheet_url:
        fetcher = partial(fetch_sheet_csv, cfg.sheet_url, cfg.fetch_timeout)
    else:
        raise SystemExit("[ERROR] No registration source: pass --csv or set sheet_url in the config")

    session = IngestionSession(RosterDirectory.from_config(cfg), fetcher, cfg.reason_separator)
    try:
        asyncio.run(session.refresh())
    except IngestionError:
        print("[ERROR] Registration data could not be loaded; try again later")
        raise SystemExit(1)
    return session


def _read_roster(path: str | Path, cfg: RosterConfig) -> WeeklyRoster:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return WeeklyRoster.from_dict(data, cfg.max_per_shift)


def _cmd_init_db(args: argparse.Namespace) -> None:
    """Initialize the database."""
    cfg = _config(args)
    init_database(cfg.db_url)
    print(f"[OK] Database initialized: {cfg.db_url}")


def _cmd_ingest(args: argparse.Namespace) -> None:
    """Load registrations and print who has registered."""
    cfg = _config(args)
    session = _ingest(args, cfg)
    summary = registration_summary(session.registrations, session.directory, cfg.low_registration_days)

    print(f"[OK] {summary.registered_count}/{summary.total_staff} staff registered")
    for entry in summary.staff:
        flag = " (low)" if entry.is_low_registration else ""
        slots = ", ".join(s.code for s in entry.slots) or "-"
        line = f"  - {entry.name} [{entry.status}{flag}] days={entry.day_count} slots={slots}"
        if entry.reason:
            line += f" reason: {entry.reason}"
        print(line)


def _cmd_generate(args: argparse.Namespace) -> None:
    """Generate next week's roster."""
    cfg = _config(args)
    key = args.week or week_key()
    db = open_session(cfg.db_url)

    try:
        history = HistoryStore(db, cfg.max_per_shift)
        if history.is_locked(key):
            # Locked weeks are answered from history without ingesting
            registrations, directory = {}, RosterDirectory.from_config(cfg)
        else:
            ingestion = _ingest(args, cfg)
            registrations, directory = ingestion.registrations, ingestion.directory
        outcome = build_week_schedule(
            registrations,
            directory,
            history,
            key,
            cfg,
            scheduler=default_scheduler(cfg, args.seed),
            lock=args.lock,
        )
        if outcome.status == UNCHANGED:
            print(f"[WARN] {key} is already locked; showing the stored roster")
        if outcome.roster is not None:
            print(roster_grid(outcome.roster, _shift_labels(cfg)).to_string())
            if args.out:
                export_roster_csv(outcome.roster, args.out, _shift_labels(cfg))
            if args.json:
                Path(args.json).write_text(
                    json.dumps(outcome.roster.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
                )
                print(f"[INFO] Roster JSON written to {args.json}")
    except Exception as e:
        db.rollback()
        print(f"[ERROR] Generation failed: {e}")
        raise
    finally:
        db.close()


def _cmd_lock(args: argparse.Namespace) -> None:
    """Lock a generated roster into history."""
    cfg = _config(args)
    key = args.week or week_key()
    roster = _read_roster(args.roster, cfg)
    db = open_session(cfg.db_url)

    try:
        outcome = lock_week(HistoryStore(db, cfg.max_per_shift), key, roster)
        db.close()
    except Exception as e:
        db.rollback()
        db.close()
        print(f"[ERROR] Lock failed: {e}")
        raise
    if outcome.status == UNCHANGED:
        raise SystemExit(f"[WARN] {key} was already locked; nothing written")


def _cmd_report(args: argparse.Namespace) -> None:
    """Print current-week and cumulative shift counts."""
    cfg = _config(args)
    key = args.week or week_key()
    directory = _ingest(args, cfg).directory if args.csv else RosterDirectory.from_config(cfg)
    db = open_session(cfg.db_url)

    try:
        history = HistoryStore(db, cfg.max_per_shift).load()
    finally:
        db.close()

    if args.roster:
        current = _read_roster(args.roster, cfg)
    else:
        current = history.get(key)
    df = load_frame(current, directory, history, key)
    print(f"Shift load for {key} (current week + {len([k for k in history if k != key])} locked weeks):")
    print(df.to_string(index=False))
    if args.out:
        export_load_csv(cumulative_load(current, directory, history, key), args.out)


def _cmd_history(args: argparse.Namespace) -> None:
    """List locked weeks."""
    cfg = _config(args)
    db = open_session(cfg.db_url)
    try:
        history = HistoryStore(db, cfg.max_per_shift).load()
    finally:
        db.close()

    if not history:
        print("No locked weeks.")
        return
    for key, roster in history.items():
        print(f"  - {key}: {roster.place_count()} shift places")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="cafe-roster",
        description="Café weekly shift roster from staff availability registrations",
    )

    # Global options
    parser.add_argument("--config", help="Path to config YAML/JSON (default: built-in settings)")
    parser.add_argument("--db", help="Database URL (default: sqlite:///roster.db)")

    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init-db", help="Initialize database")
    init.set_defaults(func=_cmd_init_db)

    ing = sub.add_parser("ingest", help="Load registrations and show who registered")
    ing.add_argument("--csv", help="Read registrations from a local CSV instead of the sheet URL")
    ing.set_defaults(func=_cmd_ingest)

    gen = sub.add_parser("generate", help="Generate next week's roster")
    gen.add_argument("--csv", help="Read registrations from a local CSV instead of the sheet URL")
    gen.add_argument("--week", help=f"Week key (default: next week, e.g. {week_key()})")
    gen.add_argument("--seed", type=int, help="Seed for tie-breaking between equally loaded staff")
    gen.add_argument("--lock", action="store_true", help="Lock the generated roster into history")
    gen.add_argument("--out", help="Optional: export roster grid to CSV")
    gen.add_argument("--json", help="Optional: write roster JSON (input for 'lock' and 'report')")
    gen.set_defaults(func=_cmd_generate)

    lck = sub.add_parser("lock", help="Lock a roster JSON into history")
    lck.add_argument("--roster", required=True, help="Roster JSON written by 'generate --json'")
    lck.add_argument("--week", help="Week key (default: next week)")
    lck.set_defaults(func=_cmd_lock)

    rep = sub.add_parser("report", help="Show cumulative shift load")
    rep.add_argument("--roster", help="Roster JSON of the week under review")
    rep.add_argument("--csv", help="Registrations CSV to extend the staff list")
    rep.add_argument("--week", help="Week key (default: next week)")
    rep.add_argument("--out", help="Optional: export load report to CSV")
    rep.set_defaults(func=_cmd_report)

    his = sub.add_parser("history", help="List locked weeks")
    his.set_defaults(func=_cmd_history)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
