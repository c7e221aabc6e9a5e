"""
Batch runner: apply a YAML file of contact operations to an in-memory book.
Run: python -m cli OPS.yaml [--list] (from repo root, with PYTHONPATH=src or installed).
"""
import argparse
import logging
import sys
from pathlib import Path

import yaml

from contactbook.application import FAILURES, ContactService
from contactbook.config import Settings, load_env_file, load_settings
from contactbook.domain import Contact, ContactDraft, ContactValidationError, build_contact
from contactbook.infrastructure import (
    InMemoryContactRepository,
    LoggingAuditSink,
    format_phone,
)

from cli.ops_loader import load_operations

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED_OPERATION = 1
EXIT_BAD_INPUT = 2


def _format_contact(contact: Contact, region: str) -> str:
    """One contact as a line: id, name, phone, address."""
    return (
        f"{contact.contact_id}: {contact.first_name} {contact.last_name}, "
        f"{format_phone(contact.phone, region)}, {contact.address}"
    )


def build_service(settings: Settings) -> ContactService:
    audit = LoggingAuditSink()
    repo = InMemoryContactRepository(settings.max_capacity, audit=audit)
    return ContactService(
        repo, audit=audit, serialize_writes=settings.serialize_writes
    )


def run_operation(service: ContactService, op: dict, region: str) -> tuple[bool, str]:
    """Apply one operation. Returns (succeeded, line to print)."""
    name = op["op"]
    contact_id = op["contact_id"]
    if name == "add":
        try:
            contact = build_contact(
                ContactDraft(
                    contact_id=contact_id,
                    first_name=op.get("first_name"),
                    last_name=op.get("last_name"),
                    phone=op.get("phone"),
                    address=op.get("address"),
                )
            )
        except ContactValidationError as e:
            return False, f"add {contact_id}: Invalid({e.field}: {e.message})"
        result = service.add_contact(contact)
    elif name == "update":
        result = service.update_contact(
            contact_id,
            first_name=op.get("first_name"),
            last_name=op.get("last_name"),
            phone=op.get("phone"),
            address=op.get("address"),
        )
    elif name == "delete":
        result = service.delete_contact(contact_id)
    else:
        contact = service.get_contact(contact_id)
        if contact is None:
            return True, f"get {contact_id}: absent"
        return True, f"get {_format_contact(contact, region)}"
    return not isinstance(result, FAILURES), f"{name} {contact_id}: {result}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m cli",
        description="Apply a YAML file of contact operations to an in-memory contact book.",
    )
    parser.add_argument("operations", type=Path, help="YAML file with an 'operations' list")
    parser.add_argument(
        "--list", action="store_true", help="print all contacts after the run"
    )
    args = parser.parse_args(argv)

    load_env_file()
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level),
    )

    try:
        operations = load_operations(args.operations)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Cannot load {args.operations}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    service = build_service(settings)
    failed = 0
    for op in operations:
        ok, line = run_operation(service, op, settings.phone_region)
        print(line)
        if not ok:
            failed += 1

    if args.list:
        contacts = sorted(service.get_all_contacts(), key=lambda c: c.contact_id)
        print(f"{len(contacts)} contact(s):")
        for contact in contacts:
            print("  " + _format_contact(contact, settings.phone_region))

    logger.info("Ran %d operation(s), %d failed", len(operations), failed)
    return EXIT_FAILED_OPERATION if failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
