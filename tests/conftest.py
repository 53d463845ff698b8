import pytest

from whsp import ConfigOption, NumberRange, OptionSchemaRegistry


@pytest.fixture(scope="function")
def registry() -> OptionSchemaRegistry:
    """Registry with one option of each kind and an APP prefix."""
    reg = OptionSchemaRegistry(env_prefix="app")
    reg.num(
        {
            "count": ConfigOption(short="c", description="How many"),
            "age": ConfigOption(validator=NumberRange(0, 120)),
        }
    ).unwrap()
    reg.opt({"name": ConfigOption(short="n")}).unwrap()
    reg.flag({"verbose": ConfigOption(short="v")}).unwrap()
    return reg
