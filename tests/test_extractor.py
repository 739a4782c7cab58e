"""
Tests for the two-pass action item extractor.

Candidates are returned before deduplication, so overlapping cues show
up here as repeated tasks.
"""

from datetime import date

import pytest

from meeting_action_items.errors import InvalidPatternError
from meeting_action_items.pipeline.extractor import (
    ActionItemExtractor,
    is_heading_line,
    opens_next_steps_section,
)


@pytest.fixture
def extractor() -> ActionItemExtractor:
    return ActionItemExtractor()


def _tasks(items) -> list[str]:
    return [item.task for item in items]


class TestInlineCues:
    """Test Pass A over the whole text."""

    def test_will_with_due_date(self, extractor, meeting_info, reference_now):
        items = extractor.extract(
            "Filipe will send the report by Friday.", "Filipe", meeting_info, reference_now
        )

        assert len(items) == 1
        assert items[0].task == "send the report"
        assert items[0].due_date == date(2026, 3, 13)
        assert items[0].raw_text == "Filipe will send the report"

    def test_overlapping_cues_are_all_kept(self, extractor, meeting_info, reference_now):
        """One sentence can match several cues; the deduplicator absorbs it later."""
        items = extractor.extract(
            "Action item: Filipe - prepare the budget deck",
            "Filipe",
            meeting_info,
            reference_now,
        )

        assert _tasks(items) == ["prepare the budget deck", "prepare the budget deck"]

    def test_short_descriptions_discarded(self, extractor, meeting_info, reference_now):
        text = "Filipe will go. Filipe to help. Filipe will reply."
        assert extractor.extract(text, "Filipe", meeting_info, reference_now) == []

    def test_six_character_description_kept(self, extractor, meeting_info, reference_now):
        items = extractor.extract("Filipe will deploy.", "Filipe", meeting_info, reference_now)
        assert _tasks(items) == ["deploy"]

    def test_due_date_window_is_local(self, extractor, meeting_info, reference_now):
        """A due cue far past the match start is not attributed to the item."""
        text = "Filipe will send the report. " + "x" * 150 + " by Friday"
        items = extractor.extract(text, "Filipe", meeting_info, reference_now)

        assert _tasks(items) == ["send the report"]
        assert items[0].due_date is None

    def test_long_task_keeps_closing_due_date(self, extractor, meeting_info, reference_now):
        """The window extends past the match, so a long task still sees its due phrase."""
        task = (
            "prepare the quarterly consolidated financial statements "
            "for the board and the external auditors"
        )
        items = extractor.extract(
            f"Filipe will {task} by Friday.", "Filipe", meeting_info, reference_now
        )

        assert _tasks(items) == [task]
        assert items[0].due_date == date(2026, 3, 13)

    def test_due_words_inside_task_do_not_shorten_it(self, extractor, meeting_info, reference_now):
        text = "Filipe will check due process. Filipe will review the deadline extension request."
        items = extractor.extract(text, "Filipe", meeting_info, reference_now)

        assert _tasks(items) == ["check due process", "review the deadline extension request"]
        assert all(item.due_date is None for item in items)

    def test_due_date_from_following_sentence(self, extractor, meeting_info, reference_now):
        text = "Filipe will send the report. Deadline: March 20."
        items = extractor.extract(text, "Filipe", meeting_info, reference_now)

        assert items[0].due_date == date(2026, 3, 20)

    def test_alternation_pattern(self, extractor, meeting_info, reference_now):
        items = extractor.extract(
            "Phil will schedule the demo.", "(Filipe|Phil)", meeting_info, reference_now
        )
        assert _tasks(items) == ["schedule the demo"]

    def test_other_people_ignored(self, extractor, meeting_info, reference_now):
        text = "Maria will send the slides. Maria to call the bank."
        assert extractor.extract(text, "Filipe", meeting_info, reference_now) == []

    def test_meeting_info_copied(self, extractor, meeting_info, reference_now):
        items = extractor.extract(
            "@Filipe: book the venue for the offsite", "Filipe", meeting_info, reference_now
        )

        assert items[0].meeting_title == meeting_info.title
        assert items[0].meeting_date == meeting_info.date
        assert items[0].document_url == meeting_info.document_url


class TestSectionScan:
    """Test Pass B over the suggested-next-steps section."""

    def test_section_with_summary_heading(self, extractor, meeting_info, reference_now):
        text = "\n".join(
            [
                "Próximas etapas sugeridas",
                "- Filipe: revisar contrato",
                "RESUMO",
                "Filipe comentou sobre o orçamento do trimestre",
            ]
        )
        items = extractor.extract(text, "Filipe", meeting_info, reference_now)

        # Pass A bullet and Pass B line collapse inline; the line after RESUMO is ignored
        assert _tasks(items) == ["revisar contrato"]

    def test_section_only_line(self, extractor, meeting_info, reference_now):
        text = "\n".join(
            [
                "Filipe comentou sobre o orçamento",
                "Próximos passos sugeridos",
                "Filipe revisa o contrato com o jurídico",
                "Entrega by Friday",
            ]
        )
        items = extractor.extract(text, "Filipe", meeting_info, reference_now)

        assert _tasks(items) == ["revisa o contrato com o jurídico"]
        assert items[0].due_date == date(2026, 3, 13)
        assert items[0].raw_text == "Filipe revisa o contrato com o jurídico"

    def test_lines_outside_section_ignored(self, extractor, meeting_info, reference_now):
        text = "Filipe revisa o contrato com o jurídico\nFilipe alinha o cronograma"
        assert extractor.extract(text, "Filipe", meeting_info, reference_now) == []

    def test_checkbox_decoration_stripped(self, extractor, meeting_info, reference_now):
        text = "Próximas etapas sugeridas\n[ ] Filipe revisa o contrato"
        items = extractor.extract(text, "Filipe", meeting_info, reference_now)

        assert "revisa o contrato" in _tasks(items)

    def test_section_near_duplicates_skipped(self, extractor, meeting_info, reference_now):
        text = "\n".join(
            [
                "Próximas etapas sugeridas",
                "Filipe revisa o contrato com o jurídico",
                "Filipe revisa o contrato",
            ]
        )
        items = extractor.extract(text, "Filipe", meeting_info, reference_now)

        assert _tasks(items) == ["revisa o contrato com o jurídico"]

    def test_sample_notes(self, extractor, meeting_info, reference_now, sample_notes):
        items = extractor.extract(sample_notes, "Filipe", meeting_info, reference_now)

        assert _tasks(items) == [
            "send the report",
            "book the venue for the offsite",
            "revisar contrato",
            "alinha o cronograma com o time de dados",
        ]
        assert items[0].due_date == date(2026, 3, 13)
        assert items[1].due_date is None


class TestHelpers:
    """Test the section boundary heuristics."""

    @pytest.mark.parametrize("line", ["RESUMO", "  DETALHES  ", "NEXT STEPS:", "Q1 PLAN"])
    def test_heading_lines(self, line):
        assert is_heading_line(line)

    @pytest.mark.parametrize("line", ["OK", "Resumo", "- FILIPE", "", "ABC"])
    def test_non_heading_lines(self, line):
        assert not is_heading_line(line)

    def test_opens_section(self):
        assert opens_next_steps_section("### Próximas etapas sugeridas")
        assert opens_next_steps_section("PRÓXIMOS PASSOS SUGERIDOS")
        assert not opens_next_steps_section("Próximas reuniões")


class TestInvalidPattern:
    """Test the only caller-visible failure mode."""

    @pytest.mark.parametrize("pattern", ["", "(Filipe"])
    def test_raises_invalid_pattern(self, extractor, meeting_info, reference_now, pattern):
        with pytest.raises(InvalidPatternError):
            extractor.extract("Filipe will send it.", pattern, meeting_info, reference_now)
