# galaxysim

Building blocks for 2D particle simulations. It covers particle records, galaxy
spawning, SPH materials and kernels, selection and editing of particles, and
wall segments with a bounding-volume hierarchy for ray queries. All operations
work on plain Python lists of particle records. Nothing is drawn to a screen.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Particles

A particle is stored as two parallel lists: `ParticlePhysics` (position,
velocity, acceleration, mass, SPH state, temperature, id) and
`ParticleRendering` (colour, size, selection and material flags). Positions and
velocities are immutable `Vec2` values. Colours are `Color` RGBA values.

```python
from galaxysim.particle import Vec2, Color, ParticlePhysics, ParticleRendering

p = ParticlePhysics.spawn(Vec2(0.0, 0.0), Vec2(1.0, 0.0), 8.5e9, 0.008, 1.0, 1.0, 1.0)
r = ParticleRendering.spawn(Color(128, 128, 128, 100), 0.125, False, False,
                            False, True, True, False, True, -1.0, 0)
physics, rendering = [p], [r]
```

Every particle receives a fresh id from `next_particle_id()`. `spawn` sets the
temperature to 288 and `sph_mass` to the mass relative to the standard mass.

## Spawning

`galaxysim.spawning.ParticlesSpawning` returns new `(physics, rendering)` lists.
You append these to your own lists.

```python
import random
from galaxysim.particle import Vec2
from galaxysim.spawning import ParticlesSpawning

spawner = ParticlesSpawning()
rng = random.Random(1)
new_physics, new_rendering = spawner.small_galaxy(Vec2(0, 0), Vec2(0, 0), True, rng)
```

It provides these methods:

- `heavy_particle(pos, vel)` creates a single massive solid body.
- `big_galaxy(center, drift, dark_matter, rng)` and `small_galaxy(...)` create rotating exponential disks. Each can add a dark-matter halo. Every particle also receives 30% of `drift`.
- `star(center, drift, rng)` creates a compact ball of particles.
- `big_bang(center, dark_matter, rng)` creates particles flying radially outwards.

Particle counts scale with `particle_amount_multiplier` and `dm_amount_multiplier`.
When `mass_multiplier_enabled` is true, per-particle masses are divided by the
same factors.

## Materials

```python
from galaxysim.materials import material_by_label, material_by_id, all_materials

water = material_by_label("water")
print(water.hot_point, water.cold_point)
```

The built-in materials are water, rock, iron, sand, soil, mud and rubber. Their
ids run from 1 to 7. An unknown id or label raises `KeyError`.

## Editing particles

- `galaxysim.selection` provides the following functions:
  - `select_cluster`, `select_closest`, `select_many_clusters` and `box_select` change the selection.
  - `invert_selection` and `deselect_all` flip or clear it.
  - `selected_particles` returns the selected records.
  - `cluster_neighbor_counts` returns the per-particle neighbour counts behind cluster selection.
- `galaxysim.deletion.delete_selected` removes selected particles. `delete_strays` removes non-solid particles that have fewer than five close neighbours. Both functions return the number removed.
- `galaxysim.subdivision.ParticleSubdivision.subdivide` splits each subdivisible particle into four quarter-mass particles. Pass `selected_only` to split only the selected ones. When the particle count has reached `particles_threshold` and `confirmed` is false, it raises `SubdivisionNeedsConfirmation`.
- `galaxysim.trails.ParticleTrails.update` records `TrailDot`s for all particles or for the selected ones. It keeps at most `max_length` frames of dots. In local mode the dots follow the selection's centre.
- `galaxysim.spaceship.ParticleSpaceship.update` ages and expires short-lived particles. It then accelerates the selected particles for each requested `Thrust`. When gas is enabled, it also spawns hot water exhaust.
- `galaxysim.constraint` defines `ParticleConstraint` and `constraint_key`, which gives an order-independent 64-bit key for a pair of particle ids.

## Density, colour and SPH helpers

- `galaxysim.density`:
  - `NeighborSearch.count_neighbors` fills each particle's `neighbors` count.
  - `NeighborSearch.neighbor_search_hash` collects neighbour ids on a spatial hash.
  - `DensitySize.size_by_density` resizes particles by acceleration or density.
  - `id_to_index` maps particle ids to list positions.
- `galaxysim.colorvisuals.ColorVisuals.apply` colours particles by density, velocity, force, shockwave, pressure, temperature, gas temperature or SPH material. It then applies the selected and dark-matter colours. `color_lerp` and `color_from_hsv` are available on their own.
- `galaxysim.sph.SPH` provides the smoothing, spiky-derivative, Laplacian and cohesion kernels. It also provides the uniform spatial hash (`grid_index`, `neighbor_cells`, `update_grid`) and `compute_delta`.

## Walls and ray queries

```python
from galaxysim.particle import Vec2
from galaxysim.walls import Wall, LightRay
from galaxysim.bvh import BVH

walls = [Wall(Vec2(10, -5), Vec2(10, 5)), Wall(Vec2(20, -5), Vec2(20, 5))]
bvh = BVH()
bvh.build(walls)
hit = bvh.traverse(LightRay(Vec2(0, 0), Vec2(1, 0)))
print(hit.t, hit.wall is walls[0], hit.point)
```

The supporting pieces are these:

- `Wall` carries its surface colours, roughness, refraction amount, IOR and dispersion. It also stores the strength of each colour, as computed by `color_strength`.
- `intersect_wall` tests a single ray against a single wall.
- `AABB2D` holds the boxes used by the hierarchy.
- `rotate_vec2` rotates a vector.

## What this package does not do

- It does not draw anything, and it has no window, keyboard or mouse handling. Selection, spawning and thrust take explicit points, flags and directions instead.
- It does not compute gravity or integrate particles over time. It has no SPH pressure solver beyond the kernels and the grid.
- It has no light sources, shape builders or light rendering. Only walls, rays and the BVH for ray/wall intersection are provided.
- It does not save or load scenes, and it has no command-line program.