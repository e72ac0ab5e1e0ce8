import importlib.util
import math
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

spec = importlib.util.spec_from_file_location(
    "compare_strategies",
    os.path.join(ROOT, "scripts", "compare_strategies.py"),
)
module = importlib.util.module_from_spec(spec)
assert spec and spec.loader
sys.modules[spec.name] = module
spec.loader.exec_module(module)  # type: ignore
ci95 = module.ci95


def test_ci95_single_value_has_zero_width():
    assert ci95([0.5]) == (0.5, 0.0)


def test_ci95_empty_is_nan():
    m, h = ci95([])
    assert math.isnan(m) and math.isnan(h)


def test_ci95_symmetric_values():
    m, h = ci95([0.0, 1.0])
    assert m == 0.5
    assert abs(h - 1.96 * 0.5 / math.sqrt(2)) < 1e-12


def test_config_defaults():
    cfg = module.Config()
    assert (cfg.seeds, cfg.rounds) == (10, 200)
