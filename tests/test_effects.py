"""Tests for effects.py: crash rings and coin sparkles."""

from lane_runner.rendering.effects import EffectManager, CrashEffect, ParticleEffect


class TestCrashEffect:
    def test_grows_and_fades_out(self):
        effect = CrashEffect(x=0, y=0)
        radius = effect.radius
        effect.update()
        assert effect.radius > radius
        assert effect.alpha < 255

        for _ in range(100):
            effect.update()
        assert effect.alpha == 0
        assert not effect.is_alive()


class TestParticleEffect:
    def test_moves_and_expires(self):
        particle = ParticleEffect(x=0, y=0, velocity_x=1, velocity_y=-2, lifetime=2)
        particle.update()
        assert (particle.x, particle.y) == (1, -2)
        particle.update()
        assert not particle.is_alive()
        assert particle.render_data()['alpha'] == 0


class TestEffectManager:
    def test_counts_and_cleanup(self):
        manager = EffectManager()
        manager.add_crash(180, 470)
        manager.add_coin_burst(180, 470, count=4)
        assert manager.active_count() == {'total': 5, 'crashes': 1, 'particles': 4}

        for _ in range(200):
            manager.update()
        assert manager.active_count()['total'] == 0

    def test_render_data_shape(self):
        manager = EffectManager()
        manager.add_crash(10, 20)
        data = manager.get_render_data()[0]
        assert set(data) == {'x', 'y', 'radius', 'alpha', 'color'}

    def test_clear(self):
        manager = EffectManager()
        manager.add_coin_burst(0, 0)
        manager.clear()
        assert manager.get_render_data() == []
