"""Tests for statistics and their plot."""

from strands import GrowthStats, Session, SimulatedScheduler, plot_growth_statistics
from strands.stats import MAX_SAMPLES
from conftest import RecordingSurface, ScriptedRandom


class TestGrowthStats:
    """Test the engine counters."""

    def test_live_and_pending(self):
        stats = GrowthStats()
        stats.record_start(0)
        stats.record_start(1)
        stats.spawns_scheduled = 3
        stats.spawns = 1
        stats.record_termination(12)

        assert stats.live == 1
        assert stats.pending_spawns == 2
        assert stats.lifetimes == [12]
        assert stats.depths == [0, 1]

    def test_samples_are_bounded(self):
        stats = GrowthStats()
        for _ in range(MAX_SAMPLES + 10):
            stats.record_start(0)
            stats.record_termination(1)

        assert stats.strands_started == MAX_SAMPLES + 10
        assert len(stats.depths) == MAX_SAMPLES
        assert len(stats.lifetimes) == MAX_SAMPLES


class TestPlot:
    """Test the statistics figure."""

    def test_plot_from_session(self, tmp_path):
        scheduler = SimulatedScheduler()
        session = Session(RecordingSurface(), scheduler, random=ScriptedRandom([0.5, 0.3, 0.8]))
        engine = session.start({'fitScreen': False})
        scheduler.run_until_idle(limit_ms=5000)

        path = tmp_path / 'stats.png'
        fig, axes = plot_growth_statistics(engine.stats, save_path=str(path))

        assert path.exists()
        assert len(axes) == 2

    def test_plot_empty_stats(self):
        fig, axes = plot_growth_statistics(GrowthStats())

        assert axes[1].get_xlabel() == 'Depth'
