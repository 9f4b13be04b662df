"""Tests for the timeline sequencer."""

import random
from datetime import timedelta, timezone

from glowlog.models.checkin import ViewMode
from glowlog.services.timeline import TimelineSequencer, has_side, image_for, resolve_frame

from conftest import BASE_TIME, make_record, records_on_days


class TestImageResolution:
    """Tests for image_for and has_side."""

    def test_front_mode(self):
        record = make_record("a", front="F", side="S")
        assert image_for(record, ViewMode.FRONT) == "F"

    def test_front_mode_uses_legacy(self):
        """Test front falls back to the legacy image."""
        record = make_record("a", front=None, side=None, legacy="OLD")
        assert image_for(record, ViewMode.FRONT) == "OLD"

    def test_side_mode_never_substitutes(self):
        """Test side mode is absent without a side photo."""
        for record in [
            make_record("a", front="F", side=None),
            make_record("b", front=None, side=None, legacy="OLD"),
        ]:
            assert image_for(record, ViewMode.SIDE) is None
            assert not has_side(record)

    def test_side_mode(self):
        record = make_record("a", front="F", side="S")
        assert image_for(record, ViewMode.SIDE) == "S"
        assert has_side(record)

    def test_missing_side_frame(self):
        """Test the frame flags an explicit missing-side state."""
        frame = resolve_frame(make_record("a", side=None), ViewMode.SIDE, 1, 4)
        assert frame.missing_side
        assert frame.image is None
        assert frame.position_label == "2 / 4"
        assert frame.to_dict()["missing_side"] is True


class TestSequencerOrdering:
    """Tests for chronological ordering."""

    def test_sorted_oldest_first(self):
        records = records_on_days(3, 1, 2, 0)
        sequencer = TimelineSequencer(records)
        assert [r.id for r in sequencer.records] == ["r0", "r1", "r2", "r3"]

    def test_sort_is_idempotent(self):
        """Test re-sorting a sorted timeline changes nothing."""
        once = TimelineSequencer(records_on_days(5, 2, 9, 1)).records
        twice = TimelineSequencer(once).records
        assert once == twice

    def test_permutation_invariant(self):
        """Test input order does not matter for distinct dates."""
        records = records_on_days(*range(8))
        expected = TimelineSequencer(records).records
        shuffled = list(records)
        random.Random(7).shuffle(shuffled)
        assert TimelineSequencer(shuffled).records == expected

    def test_ties_keep_insertion_order(self):
        """Test identical timestamps keep their input order."""
        records = [make_record(name, BASE_TIME) for name in ["x", "y", "z"]]
        sequencer = TimelineSequencer(records)
        assert [r.id for r in sequencer.records] == ["x", "y", "z"]

    def test_mixed_offsets_sort_by_instant(self):
        """Test ordering is by instant, not by wall-clock text."""
        later = make_record("later", BASE_TIME.astimezone(timezone(timedelta(hours=-10))))
        earlier = make_record("earlier", BASE_TIME - timedelta(minutes=1))
        sequencer = TimelineSequencer([later, earlier])
        assert [r.id for r in sequencer.records] == ["earlier", "later"]

    def test_snapshot_of_input(self):
        """Test the sequencer copies its input."""
        records = records_on_days(0, 1)
        sequencer = TimelineSequencer(records)
        records.clear()
        assert len(sequencer) == 2


class TestSequencerNavigation:
    """Tests for seek and step."""

    def test_seek_clamps(self):
        sequencer = TimelineSequencer(records_on_days(0, 1, 2))
        assert sequencer.seek(10) == 2
        assert sequencer.seek(-4) == 0

    def test_step_is_noop_at_ends(self):
        """Test stepping past either end stays put."""
        sequencer = TimelineSequencer(records_on_days(0, 1, 2))
        assert sequencer.step(-1) == 0
        sequencer.seek(2)
        assert sequencer.step(1) == 2
        assert sequencer.is_at_end

    def test_step_moves(self):
        sequencer = TimelineSequencer(records_on_days(0, 1, 2))
        sequencer.step(1)
        assert sequencer.current.id == "r1"
        assert not sequencer.is_at_start

    def test_empty_timeline(self):
        """Test an empty timeline never errors."""
        sequencer = TimelineSequencer([])
        assert sequencer.current is None
        assert sequencer.frame() is None
        assert sequencer.seek(3) == 0
        assert sequencer.step(1) == 0

    def test_frame_and_view_mode(self):
        """Test toggling view mode changes the resolved image."""
        sequencer = TimelineSequencer([make_record("a", front="F", side="S")])
        assert sequencer.frame().image == "F"
        assert sequencer.toggle_view_mode() == ViewMode.SIDE
        assert sequencer.frame().image == "S"
        sequencer.set_view_mode("front")
        assert sequencer.view_mode == ViewMode.FRONT
