from galaxysim.particle import Color, ParticlePhysics, ParticleRendering, Vec2
from galaxysim.trails import ParticleTrails


def _particles(*positions):
    physics = [ParticlePhysics(pos=Vec2(x, y)) for x, y in positions]
    rendering = [ParticleRendering(color=Color(i, 0, 0, 255)) for i in range(len(positions))]
    return physics, rendering


def _update(trails, physics, rendering, sel_p=(), sel_r=(), time_factor=1.0,
            global_enabled=True, selected_enabled=False, local_enabled=False, max_length=10):
    trails.update(physics, rendering, list(sel_p), list(sel_r), time_factor,
                  global_enabled, selected_enabled, local_enabled, max_length)


def test_global_trails_record_every_particle():
    physics, rendering = _particles((1.0, 2.0), (3.0, 4.0))
    trails = ParticleTrails()
    _update(trails, physics, rendering)
    assert [d.pos for d in trails.trail_dots] == [p.pos for p in physics]
    assert [d.color for d in trails.trail_dots] == [r.color for r in rendering]


def test_trail_is_trimmed_to_max_length_frames():
    physics, rendering = _particles((0.0, 0.0), (1.0, 1.0))
    trails = ParticleTrails()
    for step in range(5):
        physics[0].pos = Vec2(float(step), 0.0)
        _update(trails, physics, rendering, max_length=3)
    assert len(trails.trail_dots) == 3 * len(physics)
    assert trails.trail_dots[-2].pos == physics[0].pos


def test_paused_time_records_nothing():
    physics, rendering = _particles((0.0, 0.0))
    trails = ParticleTrails()
    _update(trails, physics, rendering, time_factor=0.0)
    assert trails.trail_dots == []


def test_disabled_trails_are_cleared():
    physics, rendering = _particles((0.0, 0.0))
    trails = ParticleTrails()
    _update(trails, physics, rendering)
    assert len(trails.trail_dots) == 1
    _update(trails, physics, rendering, global_enabled=False)
    assert trails.trail_dots == []


def test_selected_trails_record_only_selection():
    physics, rendering = _particles((0.0, 0.0), (5.0, 5.0))
    trails = ParticleTrails()
    _update(trails, physics, rendering, sel_p=physics[1:], sel_r=rendering[1:],
            global_enabled=False, selected_enabled=True)
    assert [d.pos for d in trails.trail_dots] == [physics[1].pos]


def test_local_trails_follow_selection_centre():
    physics, rendering = _particles((2.0, 0.0), (4.0, 0.0))
    trails = ParticleTrails()
    _update(trails, physics, rendering, sel_p=physics, sel_r=rendering, local_enabled=True)
    assert trails.selected_particles_average_pos == Vec2(3.0, 0.0)
    for dot in trails.trail_dots:
        assert dot.pos == dot.offset + trails.selected_particles_average_pos


def test_clear_empties_trail():
    physics, rendering = _particles((0.0, 0.0))
    trails = ParticleTrails()
    _update(trails, physics, rendering)
    trails.clear()
    assert trails.trail_dots == []