import unittest
from datetime import date

from deedguide.core.decision_engine import evaluate, generate, run_guidance
from deedguide.core.message_engine import NOT_ELIGIBLE_MESSAGE
from deedguide.domain.enums import CertificateStatus, MortgageStatus, YesNo
from factories import divorced, first_marriage, make_context, make_owner, never_married


def _household():
    return make_context(
        make_owner(first_marriage(date(2010, 1, 1)), id=1),
        make_owner(never_married(), id=2, name='TRAN VAN BINH', birth_date=date(2012, 5, 5)),
        make_owner(divorced(date(2016, 1, 1)), id=3, name='LE VAN CUONG'),
        acquisition_date=date(2015, 1, 1),
        mortgage_status=MortgageStatus.MORTGAGED,
        tax_debt_status=YesNo.YES,
    )


class EvaluateTests(unittest.TestCase):
    def test_owner_outcomes_follow_stored_order_then_flags(self):
        output = evaluate(_household())

        self.assertEqual([c.owner_id for c in output.classifications], [1, 2, 3])
        self.assertEqual(
            [c.rule for c in output.classifications],
            ['married_before_acquisition', 'age_9_to_15', 'acquired_before_divorce'],
        )
        self.assertEqual(len(output.narratives), 5)
        self.assertTrue(output.narratives[3].startswith('[PL#_1: GIAICHAP]'))
        self.assertTrue(output.narratives[4].startswith('[PL#_3: NO_TSDĐ]'))

    def test_unmatched_owner_is_reported_and_logged(self):
        context = make_context(make_owner(never_married(), id=7, birth_date=None))

        with self.assertLogs('deedguide.core.decision_engine', level='WARNING') as logs:
            output = evaluate(context)

        self.assertEqual(output.unmatched_owner_ids, [7])
        self.assertIn('[CẢNH BÁO]', output.narratives[0])
        self.assertIn('owner #7', logs.output[0])


class GenerateTests(unittest.TestCase):
    def test_generate_is_deterministic(self):
        context = _household()
        self.assertEqual(generate(context), generate(context))

    def test_one_result_per_owner_without_flags(self):
        context = make_context(make_owner(never_married(), id=1), make_owner(never_married(), id=2))
        self.assertEqual(len(generate(context)), 2)


class RunGuidanceTests(unittest.TestCase):
    def test_without_certificate_short_circuits(self):
        context = make_context(
            make_owner(never_married()),
            certificate_status=CertificateStatus.ABSENT,
            tax_debt_status=YesNo.YES,
        )
        self.assertEqual(run_guidance(context), [NOT_ELIGIBLE_MESSAGE])

    def test_with_certificate_generates(self):
        context = make_context(make_owner(never_married()))
        self.assertEqual(run_guidance(context), generate(context))


if __name__ == '__main__':
    unittest.main()
