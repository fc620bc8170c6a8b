"""CLI entry point for CCRM.

``ccrm run`` starts the interactive menu; ``ccrm grades`` prints the grade scale.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from ccrm import __version__
from ccrm.config import AppConfig, ConfigError, load_config
from ccrm.enrollment import MAX_CREDITS, CreditLimitExceededError, EnrollmentRuleChecker
from ccrm.exceptions import CcrmError
from ccrm.logging import setup_logging
from ccrm.records import GRADE_POINTS, RecordStore, Student
from ccrm.reports import gpa_report, high_achievers

logger = logging.getLogger(__name__)

EXIT_CHOICE = 6

MENU = """
--- Campus Course & Records Manager (CCRM) ---
1. Manage Students
2. Manage Courses
3. Enrollment & Grading
4. Import/Export Data
5. Backup & Reports
6. Exit"""


class ConsoleApp:
    """Menu loop over a single RecordStore.

    Domain errors are reported and the loop carries on. The Exit entry or end
    of input at the menu prompt leaves it.
    """

    def __init__(self, config: AppConfig, store: RecordStore | None = None) -> None:
        self.config = config
        self.store = store if store is not None else RecordStore()
        self.checker = EnrollmentRuleChecker(self.store)
        self._handlers = {
            1: self.manage_students,
            2: self.manage_courses,
            3: self.enroll_student,
            4: self.import_export,
            5: self.backup_and_reports,
        }

    def run(self) -> None:
        while True:
            click.echo(MENU)
            try:
                raw = click.prompt("Enter choice", default="", show_default=False).strip()
            except click.Abort:
                click.echo()
                click.echo("Exiting CCRM. Goodbye!")
                break

            if not raw.isdecimal():
                click.echo("Input must be a number.")
                continue

            choice = int(raw)
            if choice == EXIT_CHOICE:
                click.echo("Exiting CCRM. Goodbye!")
                break

            handler = self._handlers.get(choice)
            if handler is None:
                click.echo(f"Invalid choice. Please enter a number from 1 to {EXIT_CHOICE}.")
                continue

            try:
                handler()
            except CreditLimitExceededError as e:
                click.echo(f"Enrollment failed business rule check: {e}", err=True)
            except CcrmError as e:
                click.echo(f"Error: {e}", err=True)
            except ValueError as e:
                logger.debug("Rejected input: %s", e)
                click.echo(f"Invalid input: {e}", err=True)

    def manage_students(self) -> None:
        click.echo("\n--- Student Management ---")
        student_id = click.prompt("Student ID").strip()
        full_name = click.prompt("Full name").strip()
        reg_no = click.prompt("Registration number", default="", show_default=False).strip()
        gpa = click.prompt("Current GPA", type=float, default=0.0)

        student = Student(
            id=student_id,
            full_name=full_name,
            registration_number=reg_no or None,
            current_gpa=gpa,
        )
        self.store.add_student(student)

        click.echo(f"Student added: {student.full_name}")
        click.echo(f"Profile: {student}")
        click.echo(f"Enrollment date: {student.enrollment_date.isoformat()}")

        click.echo("\nHigh achiever students:")
        for s in high_achievers(self.store):
            click.echo(f" - {s.full_name} (GPA: {s.current_gpa})")

    def manage_courses(self) -> None:
        click.echo("Course management is not available yet.")

    def enroll_student(self) -> None:
        click.echo("\n--- Enrollment & Grading ---")
        student_id = click.prompt("Student ID").strip()
        course_code = click.prompt("Course code").strip()
        credits = click.prompt("Credits", type=int)

        try:
            result = self.checker.enroll(student_id, course_code, credits)
            student = self.store.get_student(student_id)
            click.echo(
                f"{student.full_name} enrolled in {result.course_code} "
                f"(credit load {result.credit_load}/{MAX_CREDITS})"
            )
        finally:
            click.echo(f"Enrollment attempt complete for {student_id}.")

    def import_export(self) -> None:
        click.echo("Import/export is not available yet.")

    def backup_and_reports(self) -> None:
        click.echo("\n--- Reports and Backup ---")
        click.echo(f"Backup is not available yet (data folder: {self.config.data_folder}).")
        click.echo(gpa_report(self.store))
        click.echo("Backup folder size report is not available yet.")


@click.group()
@click.version_option(version=__version__, prog_name="ccrm")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to ccrm.yaml (uses ./ccrm.yaml or defaults if not specified)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging on the console",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Campus Course & Records Manager."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(config, console=verbose, verbose=verbose)
    logger.info("Config loaded. Data path: %s", config.data_folder)
    ctx.obj = config


@main.command()
@click.pass_obj
def run(config: AppConfig) -> None:
    """Start the interactive menu."""
    ConsoleApp(config).run()


@main.command()
def grades() -> None:
    """Print the letter grade scale."""
    click.echo("Grade  Points")
    for grade, points in GRADE_POINTS.items():
        click.echo(f"{grade.value:<6} {points:.1f}")


if __name__ == "__main__":
    main()
