"""
Tests for maturity classification and priority scoring.
"""

from dataclasses import replace

import pytest

from adaptive_srs.scheduling import DAY_MS, Maturity, Priority, SRSEngine

from conftest import NOW


class TestGetMaturity:

    def test_unreviewed_is_new(self, engine, fresh_item):
        assert engine.get_maturity(fresh_item) is Maturity.NEW

    def test_zero_interval_is_new(self, engine, fresh_item):
        item = replace(fresh_item, review_count=3, interval=0)
        assert engine.get_maturity(item) is Maturity.NEW

    @pytest.mark.parametrize(
        "interval, expected",
        [
            (1, Maturity.LEARNING),
            (20, Maturity.LEARNING),
            (21, Maturity.YOUNG),
            (99, Maturity.YOUNG),
            (100, Maturity.MATURE),
            (365, Maturity.MATURE),
        ],
    )
    def test_interval_boundaries(self, engine, fresh_item, interval, expected):
        item = replace(fresh_item, review_count=4, interval=interval)
        assert engine.get_maturity(item) is expected


class TestCalculatePriority:

    def test_more_overdue_ranks_higher(self, engine, fresh_item):
        on_time = replace(fresh_item, due_date=NOW)
        one_day = replace(fresh_item, due_date=NOW - DAY_MS)
        three_days = replace(fresh_item, due_date=NOW - 3 * DAY_MS)

        assert engine.calculate_priority(three_days, NOW) > engine.calculate_priority(one_day, NOW)
        assert engine.calculate_priority(one_day, NOW) > engine.calculate_priority(on_time, NOW)

    def test_not_yet_due_ranks_below_on_time(self, engine, fresh_item):
        on_time = replace(fresh_item, due_date=NOW)
        future = replace(fresh_item, due_date=NOW + DAY_MS)
        assert engine.calculate_priority(on_time, NOW) > engine.calculate_priority(future, NOW)

    def test_item_type_ordering(self, engine, fresh_item):
        letter = replace(fresh_item, item_type="letter")
        vocab = replace(fresh_item, item_type="vocabulary")
        grammar = replace(fresh_item, item_type="grammar")

        assert engine.calculate_priority(letter, NOW) > engine.calculate_priority(vocab, NOW)
        assert engine.calculate_priority(vocab, NOW) > engine.calculate_priority(grammar, NOW)

    def test_unknown_type_ranks_below_known(self, engine, fresh_item):
        grammar = replace(fresh_item, item_type="grammar")
        other = replace(fresh_item, item_type="phonics")
        assert engine.calculate_priority(grammar, NOW) > engine.calculate_priority(other, NOW)

    def test_learning_beats_mature(self, engine, fresh_item):
        learning = replace(fresh_item, review_count=1, interval=5)
        mature = replace(fresh_item, review_count=10, interval=100)
        assert engine.calculate_priority(learning, NOW) > engine.calculate_priority(mature, NOW)

    def test_type_table_is_configurable(self, fresh_item):
        engine = SRSEngine(item_type_weights={"grammar": 5.0, "letter": 1.0, "phonics": 3.0})
        grammar = replace(fresh_item, item_type="grammar")
        phonics = replace(fresh_item, item_type="phonics")
        letter = replace(fresh_item, item_type="letter")

        assert engine.calculate_priority(grammar, NOW) > engine.calculate_priority(phonics, NOW)
        assert engine.calculate_priority(phonics, NOW) > engine.calculate_priority(letter, NOW)

    def test_is_pure(self, engine, fresh_item):
        item = replace(fresh_item, due_date=NOW - 2 * DAY_MS)
        assert engine.calculate_priority(item, NOW) == engine.calculate_priority(item, NOW)

    def test_returns_ordered_priority(self, engine, fresh_item):
        item = replace(fresh_item, item_type="vocabulary", due_date=NOW - DAY_MS)
        priority = engine.calculate_priority(item, NOW)

        assert isinstance(priority, Priority)
        assert priority.overdue_ms == DAY_MS
        assert priority.type_weight == 2.0
        assert priority.item_id == item.item_id


class TestOverdueDominates:
    """Type and stage weights never outrank a difference in overdue time."""

    @pytest.fixture
    def learning_letter(self, fresh_item):
        return replace(fresh_item, item_id="letter", item_type="letter", review_count=2, interval=3)

    @pytest.fixture
    def mature_grammar(self, fresh_item):
        return replace(fresh_item, item_id="grammar", item_type="grammar", review_count=12, interval=150)

    def test_slightly_overdue_beats_on_time(self, engine, learning_letter, mature_grammar):
        overdue = replace(mature_grammar, due_date=NOW - 60 * 60 * 1000)
        on_time = replace(learning_letter, due_date=NOW)
        assert engine.calculate_priority(overdue, NOW) > engine.calculate_priority(on_time, NOW)

    def test_on_time_beats_not_yet_due(self, engine, learning_letter, mature_grammar):
        on_time = replace(mature_grammar, due_date=NOW)
        upcoming = replace(learning_letter, due_date=NOW + 60 * 60 * 1000)
        assert engine.calculate_priority(on_time, NOW) > engine.calculate_priority(upcoming, NOW)

    def test_one_millisecond_more_overdue_wins(self, engine, learning_letter, mature_grammar):
        more = replace(mature_grammar, due_date=NOW - DAY_MS - 1)
        less = replace(learning_letter, due_date=NOW - DAY_MS)
        assert engine.calculate_priority(more, NOW) > engine.calculate_priority(less, NOW)

    def test_large_weights_do_not_override_overdue(self, learning_letter, mature_grammar):
        engine = SRSEngine(item_type_weights={"letter": 1_000_000.0, "grammar": 0.0})
        overdue = replace(mature_grammar, due_date=NOW - 1)
        on_time = replace(learning_letter, due_date=NOW)
        assert engine.calculate_priority(overdue, NOW) > engine.calculate_priority(on_time, NOW)

    def test_type_breaks_tie_before_stage(self, engine, fresh_item):
        mature_letter = replace(fresh_item, item_type="letter", review_count=12, interval=150)
        learning_vocab = replace(fresh_item, item_type="vocabulary", review_count=2, interval=3)
        assert engine.calculate_priority(mature_letter, NOW) > engine.calculate_priority(learning_vocab, NOW)
