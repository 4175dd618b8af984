"""Tests for ProgressState."""

from sheetsdb.importer import ProgressState


class TestProgressState:
    """Test progress and status notifications."""

    def test_progress_notifies_subscribers(self):
        state = ProgressState()
        seen = []
        state.subscribe_progress(seen.append)

        state.progress = 0.25
        state.progress = 0.5

        assert seen == [0.25, 0.5]
        assert state.progress == 0.5

    def test_progress_never_decreases(self):
        """Test that lower values are ignored without notification."""
        state = ProgressState()
        seen = []
        state.subscribe_progress(seen.append)

        state.progress = 0.6
        state.progress = 0.3
        state.progress = 0.6

        assert state.progress == 0.6
        assert seen == [0.6]

    def test_progress_clamped(self):
        state = ProgressState()
        state.progress = 3.0
        assert state.progress == 1.0

    def test_status_notifies_every_assignment(self):
        state = ProgressState()
        seen = []
        state.subscribe_status(seen.append)

        state.status = "Downloading page 'Items'..."
        state.status = "Downloading page 'Items'..."

        assert state.status == "Downloading page 'Items'..."
        assert len(seen) == 2

    def test_reset(self):
        state = ProgressState()
        state.progress = 1.0
        state.status = "done"

        state.reset()

        assert state.progress == 0.0
        assert state.status == ""
