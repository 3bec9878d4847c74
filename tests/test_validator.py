import unittest
from datetime import date

from deedguide.core import guards
from deedguide.core.validator import MESSAGES, stage_count, validate, validate_all
from deedguide.domain.enums import CertificateStatus
from deedguide.domain.facts import MarriedRecord, Owner, SingleRecord, TransactionContext, load_fact_sheet
from factories import (
    divorced,
    first_marriage,
    make_context,
    make_owner,
    remarriage_after_death,
    remarriage_after_divorce,
    widowed,
    wire_fact_sheet,
)


class GeneralStageTests(unittest.TestCase):
    def test_complete_sheet_has_no_failures(self):
        self.assertEqual(validate_all(load_fact_sheet(wire_fact_sheet())), {})

    def test_stage_0_requires_date_and_transaction(self):
        errors = validate(TransactionContext(), 0)
        self.assertEqual(set(errors), {'guidanceDate', 'transactionType'})
        self.assertEqual(errors['guidanceDate'], MESSAGES['guidanceDate'])

    def test_stage_1_requires_certificate_status(self):
        self.assertEqual(set(validate(TransactionContext(), 1)), {'hasCertificate'})

    def test_stage_2_requires_household_facts(self):
        errors = validate(TransactionContext(owner_count=0), 2)
        self.assertEqual(
            set(errors),
            {
                'numberOfOwners',
                'propertyOrigin',
                'propertyOwnershipDate',
                'isMortgaged',
                'isSecured',
                'hasFinancialDebt',
            },
        )

    def test_owner_stage_out_of_range(self):
        context = make_context(make_owner(first_marriage(date(2010, 1, 1))))
        self.assertEqual(set(validate(context, 4)), {'owners'})


class OwnerStageTests(unittest.TestCase):
    def test_blank_owner(self):
        context = make_context(Owner(id=1))
        self.assertEqual(set(validate(context, 3)), {'name', 'birthDate', 'gender', 'maritalStatus'})

    def test_single_requires_status(self):
        context = make_context(make_owner(SingleRecord()))
        self.assertEqual(set(validate(context, 3)), {'singleStatusType'})

    def test_divorce_after_acquisition_requires_former_spouse(self):
        owner = make_owner(divorced(date(2016, 1, 1), ex_name='', ex_honorific=None))
        context = make_context(owner, acquisition_date=date(2015, 1, 1))

        self.assertEqual(set(validate(context, 3)), {'exSpouseNameDivorce', 'exSpouseGenderDivorce'})

    def test_divorce_before_acquisition_skips_former_spouse(self):
        owner = make_owner(divorced(date(2010, 1, 1), ex_name='', ex_honorific=None))
        context = make_context(owner, acquisition_date=date(2015, 1, 1))

        self.assertEqual(validate(context, 3), {})

    def test_death_after_acquisition_requires_deceased_spouse(self):
        owner = make_owner(widowed(date(2016, 1, 1), ex_name='', ex_honorific=None))
        context = make_context(owner, acquisition_date=date(2015, 1, 1))

        self.assertEqual(set(validate(context, 3)), {'exSpouseNameDeath', 'exSpouseGenderDeath'})

    def test_missing_divorce_date(self):
        owner = make_owner(divorced(None))
        self.assertEqual(set(validate(make_context(owner), 3)), {'divorceDate'})

    def test_current_spouse_required_only_when_married_before_acquisition(self):
        before = make_owner(first_marriage(date(2010, 1, 1), spouse='', spouse_honorific=None))
        after = make_owner(first_marriage(date(2016, 1, 1), spouse='', spouse_honorific=None))

        self.assertEqual(
            set(validate(make_context(before, acquisition_date=date(2015, 1, 1)), 3)),
            {'currentSpouseName', 'currentSpouseGender'},
        )
        self.assertEqual(validate(make_context(after, acquisition_date=date(2015, 1, 1)), 3), {})

    def test_remarriage_requires_reason(self):
        owner = make_owner(MarriedRecord(
            marriage_date=date(2018, 1, 1),
            marriage_order='khong_phai_lan_dau',
        ))
        context = make_context(owner, acquisition_date=date(2019, 1, 1))

        self.assertEqual(
            set(validate(context, 3)),
            {'currentSpouseName', 'currentSpouseGender', 'prevMarriageEndReason'},
        )

    def test_prior_divorce_date_key_follows_reason(self):
        owner = make_owner(remarriage_after_divorce(date(2018, 1, 1), None))
        self.assertIn('prevDivorceDate', validate(make_context(owner), 3))

        owner = make_owner(remarriage_after_death(date(2018, 1, 1), None))
        self.assertIn('prevSpouseDeathDate', validate(make_context(owner), 3))

    def test_prior_spouse_required_when_acquired_during_prior_marriage(self):
        owner = make_owner(remarriage_after_divorce(date(2018, 1, 1), date(2016, 1, 1), prior_spouse=''))
        context = make_context(owner, acquisition_date=date(2015, 1, 1))
        self.assertEqual(set(validate(context, 3)), {'prevSpouseName'})

    def test_prior_spouse_not_required_between_marriages(self):
        owner = make_owner(remarriage_after_divorce(date(2018, 1, 1), date(2012, 1, 1), prior_spouse=''))
        context = make_context(owner, acquisition_date=date(2015, 1, 1))
        self.assertEqual(validate(context, 3), {})


class GuardAgreementTests(unittest.TestCase):
    """Spouse facts are requested exactly when the rule that renders them can fire."""

    DATES = [date(2012, 1, 1), date(2015, 1, 1), date(2018, 1, 1)]
    ACQUIRED = date(2015, 1, 1)

    def test_former_spouse_prompt_matches_guard(self):
        for ended in self.DATES:
            owner = make_owner(divorced(ended, ex_name='', ex_honorific=None))
            context = make_context(owner, acquisition_date=self.ACQUIRED)
            asked = 'exSpouseNameDivorce' in validate(context, 3)
            self.assertEqual(asked, guards.acquired_before_divorce(owner, context))

    def test_prior_spouse_prompt_matches_guard(self):
        for ended in self.DATES:
            owner = make_owner(remarriage_after_death(date(2020, 1, 1), ended, prior_spouse=''))
            context = make_context(owner, acquisition_date=self.ACQUIRED)
            asked = 'prevSpouseName' in validate(context, 3)
            self.assertEqual(asked, guards.acquired_during_prior_marriage(owner, context))


class StageCountTests(unittest.TestCase):
    def test_without_certificate_wizard_stops_after_stage_1(self):
        context = make_context(Owner(id=1), certificate_status=CertificateStatus.ABSENT)
        self.assertEqual(stage_count(context), 2)
        self.assertEqual(validate_all(context), {})

    def test_one_stage_per_owner(self):
        context = make_context(Owner(id=1), Owner(id=2))
        self.assertEqual(stage_count(context), 5)

    def test_validate_all_reports_failing_stages_only(self):
        context = load_fact_sheet(wire_fact_sheet(numberOfOwners=3))
        failures = validate_all(context)

        self.assertEqual(list(failures), [5])
        self.assertIn('name', failures[5])


if __name__ == '__main__':
    unittest.main()
