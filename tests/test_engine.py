"""Tests for the Quackit engine: dispatch, queued content and results."""

import io

import pytest

from quackit import Quackit, parse
from quackit.config import ParseConfig
from quackit.tokens import QuotedString, Word


class TestParse:
    def test_parse_records_commands(self, config_binds: str) -> None:
        engine = Quackit()
        engine.parse(config_binds)
        assert len(engine.parsed_commands) == 4

    def test_single_word(self) -> None:
        engine = Quackit()
        engine.parse("say")
        assert len(engine.parsed_commands) == 1

    def test_parse_replaces_previous_result(self) -> None:
        engine = Quackit()
        engine.parse("one\ntwo")
        engine.parse("three")
        assert [c.name for c in engine.parsed_commands] == ["three"]

    def test_parsing_twice_is_identical(self, config_cheats: str) -> None:
        first = Quackit()
        first.parse(config_cheats)
        second = Quackit()
        second.parse(config_cheats)
        assert first.parsed_commands == second.parsed_commands
        assert [c.location for c in first.parsed_commands] == [
            c.location for c in second.parsed_commands
        ]

    def test_parsed_commands_is_immutable_snapshot(self) -> None:
        engine = Quackit()
        engine.parse("say hi")
        assert isinstance(engine.parsed_commands, tuple)

    def test_module_level_parse(self) -> None:
        commands = parse('bind g "god"', handlers={"bind": lambda q, name, args: None})
        assert commands[0].tokens == (Word("bind"), Word("g"), QuotedString("god"))


class TestDispatch:
    def test_handler_call_counts(self, config_cheats: str) -> None:
        calls = {"sv_cheats": 0, "bind": 0}

        def count(engine, name, arguments):
            calls[name] += 1

        engine = Quackit()
        engine.register_handler("sv_cheats", count)
        engine.register_handler("bind", count)
        engine.parse(config_cheats)

        assert calls == {"sv_cheats": 2, "bind": 3}

    def test_handler_receives_engine_name_and_arguments(self) -> None:
        seen = []
        engine = Quackit()
        engine.register_handler("bind", lambda q, name, args: seen.append((q, name, args)))
        engine.parse('bind g "impulse 101"')

        assert seen == [(engine, "bind", (Word("g"), QuotedString("impulse 101")))]

    def test_unregistered_commands_recorded(self) -> None:
        engine = Quackit()
        engine.register_handler("bind", lambda q, name, args: None)
        engine.parse("unknown 1\nbind a b")
        assert [c.name for c in engine.parsed_commands] == ["unknown", "bind"]

    def test_dispatch_happens_before_next_command_is_scanned(self) -> None:
        positions = []
        engine = Quackit()
        engine.register_handler("mark", lambda q, name, args: positions.append(q.current_position))
        engine.parse("a\n  mark x\nb")

        assert positions[0].as_tuple() == (2, 9)

    def test_handler_sees_commands_in_order(self) -> None:
        order = []
        engine = Quackit()
        for name in ("a", "b", "c"):
            engine.register_handler(name, lambda q, name, args: order.append(name))
        engine.parse("c ; a\nb")
        assert order == ["c", "a", "b"]


class TestQueuedContent:
    def test_nested_exec_flattens_in_order(self, config_exec: str, exec_by_name) -> None:
        engine = Quackit()
        engine.register_handler("exec", exec_by_name)
        engine.parse(config_exec)

        names = [c.name for c in engine.parsed_commands]
        assert len(names) == 11
        assert names == [
            "exec",
            "exec",
            # testConfig2
            "sv_cheats",
            "sv_cheats",
            "bind",
            "bind",
            "bind",
            # testConfig1
            "say",
            "sv_cheats",
            "bind",
            "bind",
        ]

    def test_queued_content_resolved_depth_first(self) -> None:
        tree = {
            "root": "inc a\ninc b",
            "a": "inc a1\nleaf_a",
            "a1": "leaf_a1",
            "b": "leaf_b",
        }

        def include(engine, name, arguments):
            engine.queue_content(tree[arguments[0].text])

        engine = Quackit()
        engine.register_handler("inc", include)
        engine.parse("inc root\ntop")

        assert [" ".join(c.values()) for c in engine.parsed_commands] == [
            "inc root",
            "top",
            "inc a",
            "inc b",
            "inc a1",
            "leaf_a",
            "leaf_a1",
            "leaf_b",
        ]

    def test_sibling_entries_wait_for_nested(self) -> None:
        texts = {"one": "load two\nfirst_done", "two": "second", "three": "third"}

        def load(engine, name, arguments):
            engine.queue_content(texts[arguments[0].text])

        engine = Quackit()
        engine.register_handler("load", load)
        engine.parse("load one\nload three")

        assert [c.values() for c in engine.parsed_commands] == [
            ("load", "one"),
            ("load", "three"),
            ("load", "two"),
            ("first_done",),
            ("second",),
            ("third",),
        ]

    def test_multiple_queues_from_one_handler_keep_order(self) -> None:
        def many(engine, name, arguments):
            engine.queue_content("x1")
            engine.queue_content("x2")

        engine = Quackit()
        engine.register_handler("many", many)
        engine.parse("many")
        assert [c.name for c in engine.parsed_commands] == ["many", "x1", "x2"]

    def test_queued_content_uses_same_handlers(self) -> None:
        calls = []
        engine = Quackit()
        engine.register_handler("god", lambda q, name, args: calls.append(name))
        engine.register_handler("exec", lambda q, name, args: q.queue_content("god"))
        engine.parse("exec cheats")
        assert calls == ["god"]

    def test_depth_visible_to_handlers(self) -> None:
        depths = []

        def nest(engine, name, arguments):
            depths.append(engine.depth)
            if engine.depth < 2:
                engine.queue_content("nest")

        engine = Quackit()
        engine.register_handler("nest", nest)
        engine.parse("nest")

        assert depths == [0, 1, 2]
        assert engine.depth == 0

    def test_content_queued_while_idle_follows_next_scan(self) -> None:
        engine = Quackit()
        engine.register_handler("later", lambda q, name, args: q.queue_content("queued"))
        engine.queue_content("held")
        engine.parse("later")

        assert [c.name for c in engine.parsed_commands] == ["later", "held", "queued"]

    def test_held_content_used_once(self) -> None:
        engine = Quackit()
        engine.queue_content("held")
        engine.parse("first")
        engine.parse("second")
        assert [c.name for c in engine.parsed_commands] == ["second"]

    def test_queued_source_file_in_locations(self) -> None:
        engine = Quackit()
        engine.register_handler(
            "exec",
            lambda q, name, args: q.queue_content("\ngod", source_file="cheats.cfg"),
        )
        engine.parse("exec cheats", source_file="autoexec.cfg")

        top, nested = engine.parsed_commands
        assert str(top.location) == "autoexec.cfg:1:1"
        assert str(nested.location) == "cheats.cfg:2:1"

    def test_empty_queued_content(self) -> None:
        engine = Quackit()
        engine.register_handler("exec", lambda q, name, args: q.queue_content(""))
        engine.parse("exec nothing")
        assert len(engine.parsed_commands) == 1

    def test_depth_limit_allows_configured_depth(self) -> None:
        def nest(engine, name, arguments):
            if engine.depth < 3:
                engine.queue_content("nest")

        engine = Quackit(config=ParseConfig(max_queue_depth=3))
        engine.register_handler("nest", nest)
        engine.parse("nest")
        assert len(engine.parsed_commands) == 4


class TestCurrentPosition:
    def test_initial_position(self) -> None:
        assert Quackit().current_position.as_tuple() == (1, 1)

    def test_position_after_parse(self) -> None:
        engine = Quackit()
        engine.parse("say")
        assert engine.current_position.as_tuple() == (1, 4)

    def test_position_inside_queued_content(self) -> None:
        seen = []
        engine = Quackit()
        engine.register_handler("exec", lambda q, name, args: q.queue_content("one\ntwo"))
        engine.register_handler("two", lambda q, name, args: seen.append(q.current_position))
        engine.parse("exec x")

        assert seen[0].as_tuple() == (2, 4)

    def test_position_after_nested_parse_is_top_level_end(self) -> None:
        engine = Quackit()
        engine.register_handler("exec", lambda q, name, args: q.queue_content("one\ntwo\nthree"))
        engine.parse("exec x")
        assert engine.current_position.as_tuple() == (1, 7)

    def test_position_resets_per_parse(self) -> None:
        engine = Quackit()
        engine.parse("a\nb\nc")
        engine.parse("d")
        assert engine.current_position.as_tuple() == (1, 2)


class TestParseStream:
    def test_text_stream(self, config_binds: str) -> None:
        engine = Quackit()
        engine.parse_stream(io.StringIO(config_binds))
        assert len(engine.parsed_commands) == 4

    def test_bytes_stream_decoded(self) -> None:
        engine = Quackit()
        engine.parse_stream(io.BytesIO("say café".encode()))
        assert engine.parsed_commands[0].values() == ("say", "café")

    def test_configured_encoding(self) -> None:
        engine = Quackit(config=ParseConfig(encoding="latin-1"))
        engine.parse_stream(io.BytesIO(b"say caf\xe9"))
        assert engine.parsed_commands[0].values() == ("say", "café")

    def test_stream_name_used_as_source_file(self, tmp_path) -> None:
        path = tmp_path / "autoexec.cfg"
        path.write_text("quit\n")
        engine = Quackit()
        with path.open() as f:
            engine.parse_stream(f)
        assert engine.parsed_commands[0].location.source_file == str(path)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", 0),
        ("say", 1),
        ("say;", 1),
        ("a;b;c", 1),
        ("a ;b ;c", 3),
        ("a\n\n\nb", 2),
        ("// only a comment", 0),
    ],
)
def test_command_counts(source: str, expected: int) -> None:
    engine = Quackit()
    engine.parse(source)
    assert len(engine.parsed_commands) == expected
