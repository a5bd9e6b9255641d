from limbint.config.config import (OptionDescription, BoolOption,
  ChoiceOption, Config)


bigint_optiondescription = OptionDescription("bigint", "Bigint engine options", [
    BoolOption("check_limbs",
               "check the limb invariant of every normalized value",
               default=False, cmdline="--check-limbs"),

    BoolOption("log", "log long division and decimal conversion steps",
               default=False, cmdline="--log"),

    ChoiceOption("multiply", "multiplication kernel to use when both "
                 "factors are the same value",
                 ["plain", "squaring"], "squaring",
                 cmdline="--multiply"),
])


def get_bigint_config(overrides=None):
    if overrides is None:
        overrides = {}
    descr = OptionDescription("limbint", "all options",
                              [bigint_optiondescription])
    return Config(descr, **overrides)
