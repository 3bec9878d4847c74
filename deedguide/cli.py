import json

import click
from flask import current_app
from flask.cli import with_appcontext

from deedguide.core.decision_engine import run_guidance
from deedguide.core.validator import validate, validate_all
from deedguide.domain.facts import TransactionContext, load_fact_sheet
from deedguide.services.guidance_report import build_guidance_report


def _load_facts(stream) -> TransactionContext:
    try:
        data = json.load(stream)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f'Invalid JSON in {stream.name}: {exc}')

    try:
        return load_fact_sheet(data)
    except ValueError as exc:
        raise click.ClickException(f'Invalid fact sheet: {exc}')


def _echo_failures(failures: dict) -> None:
    for stage, errors in failures.items():
        click.echo(f'Stage {stage}:', err=True)
        for key, message in errors.items():
            click.echo(f'  - {key}: {message}', err=True)


@click.command('guidance-validate')
@click.argument('facts', type=click.File('r', encoding='utf-8'))
@click.option('--stage', type=int, default=None, help='Check a single wizard stage (default: all stages)')
@with_appcontext
def guidance_validate_command(facts, stage) -> None:
    """Report missing fields in a fact sheet."""
    context = _load_facts(facts)

    if stage is None:
        failures = validate_all(context)
    else:
        errors = validate(context, stage)
        failures = {stage: errors} if errors else {}

    if failures:
        _echo_failures(failures)
        raise click.exceptions.Exit(1)

    click.echo('✓ Fact sheet is complete.')


@click.command('guidance-run')
@click.argument('facts', type=click.File('r', encoding='utf-8'))
@click.option('--report', is_flag=True, help='Print the full guidance sheet instead of the bare results')
@with_appcontext
def guidance_run_command(facts, report) -> None:
    """Classify every owner in a fact sheet and print the guidance."""
    context = _load_facts(facts)

    failures = validate_all(context)
    if failures:
        click.echo('Fact sheet is incomplete; guidance was not generated.', err=True)
        _echo_failures(failures)
        raise click.exceptions.Exit(1)

    results = run_guidance(context)

    if report:
        click.echo(
            build_guidance_report(
                context,
                results,
                office_name=current_app.config['GUIDANCE_OFFICE_NAME'],
                version=current_app.config['GUIDANCE_SHEET_VERSION'],
            ),
            nl=False,
        )
        return

    click.echo('\n\n'.join(results))
