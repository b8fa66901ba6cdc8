"""Shared config fixtures.

The three configs mirror real-world usage: mixed separators and quoted
binds, repeated cvars, and a config that execs the other two.
"""

import pytest

CONFIG_BINDS = """
    say "test"; sv_cheats 0
    bind g "sv_cheats 1; godmode"
    bind v "sv_cheats 1; noclip"
    """

CONFIG_CHEATS = """
    sv_cheats 0
    sv_cheats 1
    bind n "noclip"
    bind g "impulse 2; +attack; wait; -attack; impulse 4"
    bind x "say learn2aim"
    """

CONFIG_EXEC = """
        exec "testConfig2"
        exec "testConfig1"
        """

CONFIGS = {
    "testConfig1": CONFIG_BINDS,
    "testConfig2": CONFIG_CHEATS,
}


@pytest.fixture
def config_binds() -> str:
    return CONFIG_BINDS


@pytest.fixture
def config_cheats() -> str:
    return CONFIG_CHEATS


@pytest.fixture
def config_exec() -> str:
    return CONFIG_EXEC


@pytest.fixture
def exec_by_name():
    """Handler queuing CONFIGS[name] for `exec "name"`."""

    def handler(engine, name, arguments):
        engine.queue_content(CONFIGS[arguments[0].text])

    return handler
