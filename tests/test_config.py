import dataclasses

import pytest

from verlet_sims.core import SimConfig
from verlet_sims.presets.basic import make_simulation_from_preset
from verlet_sims.utils.cli import build_parser
from verlet_sims.utils.preset_loader import load_preset


class TestSimConfig:

    def test_defaults_match_reference_run(self):
        cfg = SimConfig()
        assert cfg.gravity == (0.0, 750.0)
        assert cfg.container_center == (300.0, 300.0)
        assert cfg.container_radius == 250.0
        assert cfg.particle_radius == 4.0
        assert cfg.max_particles == 1000
        assert cfg.spawn_cadence == 1
        assert cfg.sub_steps == 6

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            SimConfig().sub_steps = 8

    def test_sequences_become_float_tuples(self):
        cfg = SimConfig(gravity=[0, 10], container_center=[0, 0], spawn_point=[0, 0])
        assert cfg.gravity == (0.0, 10.0)
        assert isinstance(cfg.container_center, tuple)

    @pytest.mark.parametrize(
        "overrides",
        [
            dict(particle_radius=0.0),
            dict(container_radius=4.0),
            dict(max_particles=-1),
            dict(spawn_cadence=0),
            dict(sub_steps=0),
            dict(damping_factor=1.5),
            dict(restitution_coefficient=-0.1),
            dict(spawn_period=0),
            dict(spawn_point=(300.0, 50.0)),
            dict(gravity=(0.0, 1.0, 2.0)),
        ],
    )
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            SimConfig(**overrides)

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="wind"):
            SimConfig.from_dict({"wind": 3.0})

    def test_dict_round_trip(self):
        cfg = SimConfig(sub_steps=8, restitution_coefficient=0.5)
        assert SimConfig.from_dict(cfg.to_dict()) == cfg

    def test_from_args_overrides_base(self):
        args = build_parser().parse_args(["--sub_steps", "8", "--gravity", "500"])
        cfg = SimConfig.from_args(args, base=SimConfig(max_particles=10))
        assert cfg.sub_steps == 8
        assert cfg.gravity == (0.0, 500.0)
        assert cfg.max_particles == 10
        assert cfg.damping_factor == 0.999


class TestPresets:

    def test_bundled_default_matches_dataclass_defaults(self):
        preset = load_preset("default")
        assert preset.to_config() == SimConfig()
        assert preset.resolved["run"]["frame_rate"] == 60

    def test_bundled_variant_includes_default(self):
        preset = load_preset("fine_substeps")
        cfg = preset.to_config()
        assert cfg.sub_steps == 8
        assert cfg.restitution_coefficient == 0.5
        assert cfg.max_particles == 1000
        assert [p.name for p in preset.loaded_files] == ["default.yaml", "fine_substeps.yaml"]

    def test_include_merge_from_files(self, tmp_path):
        (tmp_path / "base.yaml").write_text("simulation:\n  sub_steps: 8\n  max_particles: 10\n")
        (tmp_path / "run.yaml").write_text("include:\n  - base.yaml\nsimulation:\n  max_particles: 20\n")
        cfg = load_preset(tmp_path / "run.yaml").to_config()
        assert cfg.sub_steps == 8
        assert cfg.max_particles == 20

    def test_circular_include_raises(self, tmp_path):
        (tmp_path / "a.yaml").write_text("include:\n  - b.yaml\n")
        (tmp_path / "b.yaml").write_text("include:\n  - a.yaml\n")
        with pytest.raises(ValueError, match="Circular"):
            load_preset(tmp_path / "a.yaml")

    def test_non_mapping_root_raises(self, tmp_path):
        (tmp_path / "bad.yaml").write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_preset(tmp_path / "bad.yaml")

    def test_missing_preset_raises(self):
        with pytest.raises(FileNotFoundError):
            load_preset("no_such_preset")

    def test_make_simulation_from_preset(self, capsys):
        sim = make_simulation_from_preset("fine_substeps")
        assert sim.config.sub_steps == 8
        assert sim.n_particles == 0
        assert "sim config" in capsys.readouterr().out
