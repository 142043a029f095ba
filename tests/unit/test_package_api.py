import importlib
import inspect


def test_package_reexports_exist():
    pg = importlib.import_module("pathgen")

    for name in [
        "PathConfig",
        "Point",
        "Waypoint",
        "GeneratedPoint",
        "FlagPoint",
        "PathGenerator",
        "CubicSplinePath",
        "CatmullRomPath",
        "LinearPath",
    ]:
        assert hasattr(pg, name), f"pathgen missing {name}"
        assert inspect.isclass(getattr(pg, name)), f"{name} should be a class"

    for name in ["generate", "get_generator", "export_document", "load_document", "nearest_index"]:
        assert callable(getattr(pg, name, None)), f"pathgen.{name} should be callable"

    assert isinstance(pg.__version__, str)
    assert set(pg.__all__) <= set(dir(pg))


def test_every_algorithm_has_a_generator():
    pg = importlib.import_module("pathgen")
    for algorithm in pg.PathAlgorithm:
        cls = pg.PATH_ALGORITHMS[algorithm]
        assert issubclass(cls, pg.PathGenerator)


def test_curves_package_reexports():
    curves = importlib.import_module("pathgen.curves")
    for name in ["CurveEvaluator", "CubicBezier", "CatmullRomSegment", "LinearSegment"]:
        assert inspect.isclass(getattr(curves, name)), f"pathgen.curves missing {name}"
    assert callable(curves.catmull_rom_chain)
