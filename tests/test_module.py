import pytest

from swiftqr.module import Module, ModuleType


@pytest.mark.parametrize(
    ("factory", "expected"),
    [
        (Module.data, ModuleType.DATA),
        (Module.finder_pattern, ModuleType.FINDER_PATTERN),
        (Module.alignment, ModuleType.ALIGNMENT),
        (Module.timing, ModuleType.TIMING),
        (Module.format, ModuleType.FORMAT),
        (Module.version, ModuleType.VERSION),
        (Module.dark, ModuleType.DARK_MODULE),
        (Module.empty, ModuleType.EMPTY),
    ],
)
def test_factories_set_type(factory, expected):
    module = factory(Module.LIGHT)
    assert module.module_type is expected


def test_value_light():
    module = Module.data(Module.LIGHT)
    assert module.value == Module.LIGHT


def test_value_dark():
    module = Module.data(Module.DARK)
    assert module.value == Module.DARK


def test_set():
    module = Module.data(Module.LIGHT)
    module.set(Module.DARK)
    assert module.value == Module.DARK
    assert module.module_type is ModuleType.DATA


def test_toggle_twice_restores_value():
    module = Module.timing(Module.DARK)
    module.toggle()
    assert module.value is False
    module.toggle()
    assert module.value is True


def test_equality_with_bool_compares_value_only():
    assert Module.alignment(True) == True  # noqa: E712
    assert Module.alignment(False) == False  # noqa: E712
    assert not (Module.alignment(True) == False)  # noqa: E712


def test_equality_between_modules_includes_type():
    assert Module.data(True) == Module.data(True)
    assert not (Module.data(True) == Module.timing(True))
    assert not (Module.data(True) == Module.data(False))


def test_hash_consistent_with_equality():
    assert hash(Module.format(True)) == hash(Module(True, ModuleType.FORMAT))
    assert len({Module.data(True), Module.data(True), Module.data(False)}) == 2