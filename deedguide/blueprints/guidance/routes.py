from __future__ import annotations

from flask import current_app, jsonify, make_response, request

from deedguide.core.decision_engine import GuidanceOutput, evaluate, run_guidance
from deedguide.core.validator import validate, validate_all
from deedguide.domain.facts import TransactionContext, load_fact_sheet
from deedguide.services.guidance_report import build_guidance_report

from . import guidance_bp


def _load_context() -> TransactionContext:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    return load_fact_sheet(data)


def _bad_request(exc: ValueError):
    current_app.logger.warning('Rejected fact sheet: %s', exc)
    return jsonify({'success': False, 'error': str(exc)}), 400


def _incomplete(failures: dict[int, dict[str, str]]):
    return jsonify({
        'success': False,
        'error': 'Fact sheet is incomplete',
        'errors': {str(stage): errors for stage, errors in failures.items()},
    }), 422


def _serialize_outcomes(output: GuidanceOutput) -> list[dict]:
    outcomes = [
        {
            'kind': 'owner',
            'owner_id': c.owner_id,
            'category': c.category,
            'rule': c.rule,
            'signers': list(c.signers),
            'narrative': c.narrative,
        }
        for c in output.classifications
    ]
    outcomes.extend({'kind': 'flag', 'flag': f.flag, 'narrative': f.narrative} for f in output.flags)
    return outcomes


@guidance_bp.route('/validate/<int:stage>', methods=['POST'])
def validate_stage(stage: int):
    try:
        context = _load_context()
    except ValueError as exc:
        return _bad_request(exc)

    errors = validate(context, stage)
    return jsonify({'stage': stage, 'valid': not errors, 'errors': errors})


@guidance_bp.route('/generate', methods=['POST'])
def generate_guidance():
    try:
        context = _load_context()
    except ValueError as exc:
        return _bad_request(exc)

    failures = validate_all(context)
    if failures:
        return _incomplete(failures)

    if not context.has_certificate:
        return jsonify({'success': True, 'results': run_guidance(context), 'outcomes': []})

    output = evaluate(context)
    current_app.logger.info(
        'Guidance generated for %d owner(s), %d household flag(s)',
        len(output.classifications),
        len(output.flags),
    )
    return jsonify({
        'success': True,
        'results': output.narratives,
        'outcomes': _serialize_outcomes(output),
    })


@guidance_bp.route('/report.txt', methods=['POST'])
def guidance_report():
    try:
        context = _load_context()
    except ValueError as exc:
        return _bad_request(exc)

    failures = validate_all(context)
    if failures:
        return _incomplete(failures)

    report = build_guidance_report(
        context,
        run_guidance(context),
        office_name=current_app.config['GUIDANCE_OFFICE_NAME'],
        version=current_app.config['GUIDANCE_SHEET_VERSION'],
    )

    response = make_response(report)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    response.headers['Content-Disposition'] = 'attachment; filename="huong-dan-ho-so.txt"'
    return response
