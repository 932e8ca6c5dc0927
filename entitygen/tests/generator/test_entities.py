"""Tests for entity rendering and the behaviour of the generated code"""

from pytest import raises

from entitygen.generator import EntityBuilder, EnumBuilder, PropertyBuilder
from entitygen.generator.entities import render_entity, render_enum, render_module
from entitygen.runtime import (
    ChannelId,
    Err,
    FetchError,
    FetchFailed,
    Ok,
    PropertyKey,
)

CODEC = (
    EnumBuilder()
    .name("EnumX")
    .documentation("Codec of a channel.")
    .value("SPEEX", 0)
    .value("CELT", 3, "Legacy codec")
    .value("OPUS", 4)
    .finalize()
)

BASE = (
    PropertyBuilder.new()
    .namespace("ChannelProperties")
    .args("id, ")
    .update_args("self.id, ")
    .reinterpretable(["EnumX"])
)


def scenario_entity(*extra):
    """The id / name / codec entity, with optional extra properties."""
    return (
        EntityBuilder.new()
        .name("ChannelData")
        .api_name("Channel")
        .with_api(True)
        .documentation("A channel on a server")
        .constructor_args(("id", "ChannelId"))
        .properties(
            [
                BASE.name("id").type("ChannelId").fallible(False).initialize(False).api(False).finalize(),
                BASE.name("name").type("string").functions({"string": "fetch_str"}).finalize(),
                BASE.name("codec").type("EnumX").functions({"int32": "fetch_int"}).finalize(),
                *extra,
            ]
        )
        .finalize()
    )


def gen_code(entities, enums=(CODEC,)):
    gbl = globals().copy()
    generated_code = render_module(entities, enums)
    exec(generated_code, gbl)
    return gbl


def describe_render_entity():
    def declares_fields_in_order(expect):
        text = render_entity(scenario_entity(), ["EnumX"])
        expect(text.startswith("@dataclass\nclass ChannelData:\n")) == True
        expect(
            "    _fetcher: Any = field(repr=False, compare=False)\n"
            "    id: ChannelId\n"
            "    name: Result[str]\n"
            "    codec: Result[EnumX]\n" in text
        ) == True

    def emits_getters(expect):
        text = render_entity(scenario_entity(), ["EnumX"])
        expect("    def get_name(self) -> Result[str]:\n        return self.name\n" in text) == True
        expect("    def get_codec(self) -> Result[EnumX]:\n        return self.codec\n" in text) == True

    def reinterprets_codec_from_the_int_fetch(expect):
        text = render_entity(scenario_entity(), ["EnumX"])
        expect(
            "        self.codec = self._fetcher.fetch_int(self.id, "
            'PropertyKey("ChannelProperties", "Codec")).and_then(EnumX.decode)\n' in text
        ) == True

    def emits_update_in_descriptor_order(expect):
        text = render_entity(scenario_entity(), ["EnumX"])
        expect(
            "    def update(self) -> None:\n"
            '        """Refresh every updatable field from the fetch layer."""\n'
            "        self.update_name()\n"
            "        self.update_codec()\n" in text
        ) == True

    def repairs_only_fallible_fields(expect):
        text = render_entity(scenario_entity(), ["EnumX"])
        expect("self.name = other.name" in text) == True
        expect("self.codec = other.codec" in text) == True
        expect("self.id = other.id" in text) == False

    def emits_the_api_view(expect):
        text = render_entity(scenario_entity(), ["EnumX"])
        expect("class Channel:\n" in text) == True
        expect("    def get_name(self) -> Result[str]:\n        data = self._data()\n" in text) == True
        expect("def get_id" in text.split("class Channel:")[1]) == False

    def leaves_out_disabled_blocks(expect):
        entity = EntityBuilder.new().name("OutdatedData").with_update(False).with_constructor(False)
        entity = entity.properties([BASE.name("name").type("string").finalize()]).finalize()
        text = render_entity(entity)
        expect("def update" in text) == False
        expect("def new" in text) == False
        expect("def get_name" in text) == True

    def emits_pass_without_updatable_fields(expect):
        entity = (
            EntityBuilder.new()
            .name("Ids")
            .constructor_args(("id", "ChannelId"))
            .properties([BASE.name("id").type("ChannelId").fallible(False).finalize()])
            .finalize()
        )
        text = render_entity(entity)
        expect('        """Refresh every updatable field from the fetch layer."""\n        pass\n' in text) == True

    def injects_freeform_blocks_in_order(expect):
        entity = scenario_entity()
        builder = (
            EntityBuilder.new()
            .name("ServerData")
            .constructor_args(("id", "ChannelId"))
            .extra_attributes("outdated: int\n")
            .extra_methods("def get_outdated(self) -> int:\n    return self.outdated\n")
            .extra_initialization("# not in the main struct\nlegacy = 3\n")
            .extra_creation("outdated=legacy,\n")
            .properties(entity.properties[:2])
        )
        text = render_entity(builder.finalize())
        expect("    name: Result[str]\n    outdated: int\n" in text) == True
        expect("    def get_outdated(self) -> int:\n        return self.outdated\n" in text) == True
        expect(
            "        # not in the main struct\n"
            "        legacy = 3\n"
            "        name = Err(FetchError.NOT_FETCHED)\n"
            "        return cls(\n"
            "            fetcher,\n"
            "            id=id,\n"
            "            name=name,\n"
            "            outdated=legacy,\n"
            "        )\n" in text
        ) == True

    def is_deterministic(expect):
        expect(render_entity(scenario_entity(), ["EnumX"])) == render_entity(scenario_entity(), ["EnumX"])


def describe_render_enum():
    def declares_members_with_their_codes(expect):
        text = render_enum(CODEC)
        expect(
            "class EnumX(RawEnum):\n"
            '    """Codec of a channel."""\n'
            "\n"
            "    SPEEX = 0\n"
            "    #: Legacy codec\n"
            "    CELT = 3\n"
            "    OPUS = 4\n"
        ) == text


def describe_render_module():
    def lists_exports(expect):
        text = render_module([scenario_entity()], [CODEC])
        expect('__all__ = [\n    "EnumX",\n    "ChannelData",\n    "Channel",\n]' in text) == True

    def imports_the_runtime(expect):
        text = render_module([scenario_entity()], [CODEC], runtime_import="plugin.runtime")
        expect("from plugin.runtime import (\n" in text) == True

    def is_deterministic(expect):
        first = render_module([scenario_entity()], [CODEC])
        second = render_module([scenario_entity()], [CODEC])
        expect(first) == second


def describe_generated_entity():
    def starts_fallible_fields_as_not_fetched(expect, fetcher):
        ChannelData = gen_code([scenario_entity()])["ChannelData"]

        channel = ChannelData.new(fetcher, ChannelId(7))
        expect(channel.get_id()) == 7
        expect(channel.get_name()) == Err(FetchError.NOT_FETCHED)
        expect(channel.get_codec()) == Err(FetchError.NOT_FETCHED)
        expect(fetcher.calls) == []

    def fetches_on_update(expect, fetcher):
        gen = gen_code([scenario_entity()])
        ChannelData, EnumX = gen["ChannelData"], gen["EnumX"]
        fetcher.values = {"Name": Ok("room1"), "Codec": Ok(4)}

        channel = ChannelData.new(fetcher, ChannelId(7))
        channel.update()

        expect(channel.get_name()) == Ok("room1")
        expect(channel.get_codec()) == Ok(EnumX.OPUS)
        expect(fetcher.called("fetch_str")) == [(7, PropertyKey("ChannelProperties", "Name"))]
        expect(fetcher.called("fetch_int")) == [(7, PropertyKey("ChannelProperties", "Codec"))]

    def captures_failures_per_field(expect, fetcher):
        ChannelData = gen_code([scenario_entity()])["ChannelData"]
        fetcher.values = {"Name": Err(FetchError.INVALID_ID), "Codec": Ok(1)}

        channel = ChannelData.new(fetcher, ChannelId(7))
        channel.update()

        expect(channel.get_name()) == Err(FetchError.INVALID_ID)
        expect(channel.get_codec()) == Err(FetchError.UNKNOWN_CODE)

    def overwrites_previous_values_on_update(expect, fetcher):
        ChannelData = gen_code([scenario_entity()])["ChannelData"]
        fetcher.values = {"Name": Ok("room1")}
        channel = ChannelData.new(fetcher, ChannelId(7))
        channel.update()

        fetcher.values = {"Name": Err(FetchError.NOT_CONNECTED)}
        channel.update_name()
        expect(channel.get_name()) == Err(FetchError.NOT_CONNECTED)

    def aborts_construction_when_a_plain_fetch_fails(expect, fetcher):
        max_clients = BASE.name("max_clients").type("int32").fallible(False)
        max_clients = max_clients.functions({"int32": "fetch_int"}).finalize()
        ChannelData = gen_code([scenario_entity(max_clients)])["ChannelData"]

        with raises(FetchFailed) as info:
            ChannelData.new(fetcher, ChannelId(7))
        expect(info.value.error) == FetchError.UNDEFINED

    def keeps_updating_after_an_out_of_range_timestamp(expect, fetcher):
        created = BASE.name("created").type("timestamp").functions({"uint64": "fetch_u64"})
        entity = (
            EntityBuilder.new()
            .name("ServerData")
            .constructor_args(("id", "ChannelId"))
            .properties(
                [
                    BASE.name("id").type("ChannelId").fallible(False).initialize(False).finalize(),
                    created.finalize(),
                    BASE.name("name").type("string").functions({"string": "fetch_str"}).finalize(),
                ]
            )
            .finalize()
        )
        ServerData = gen_code([entity])["ServerData"]
        fetcher.values = {"Created": Ok(2**64 - 1), "Name": Ok("x")}

        server = ServerData.new(fetcher, ChannelId(1))
        server.update()

        expect(server.get_created()) == Err(FetchError.OUT_OF_RANGE)
        expect(server.get_name()) == Ok("x")

    def keeps_quotes_and_backslashes_in_docstrings(expect):
        nickname = BASE.name("nickname").type("string").functions({"string": "fetch_str"})
        nickname = nickname.documentation('Shown as "nick"').finalize()
        path = BASE.name("path").type("string").functions({"string": "fetch_str"})
        path = path.documentation("Stored as C:\\voice\\").finalize()
        entity = (
            EntityBuilder.new()
            .name("ChannelData")
            .documentation('A "channel"')
            .constructor_args(("id", "ChannelId"))
            .properties(
                [BASE.name("id").type("ChannelId").fallible(False).initialize(False).finalize(), nickname, path]
            )
            .finalize()
        )
        enum = EnumBuilder().name("EnumX").documentation('Codec "kind"').value("OPUS", 4).finalize()

        gbl = gen_code([entity], (enum,))

        expect(gbl["ChannelData"].__doc__) == 'A "channel"'
        expect(gbl["ChannelData"].get_nickname.__doc__) == 'Shown as "nick"'
        expect(gbl["ChannelData"].get_path.__doc__) == "Stored as C:\\voice\\"
        expect(gbl["EnumX"].__doc__) == 'Codec "kind"'

    def keeps_the_last_good_plain_value(expect, fetcher):
        max_clients = BASE.name("max_clients").type("int32").fallible(False)
        max_clients = max_clients.functions({"int32": "fetch_int"}).finalize()
        ChannelData = gen_code([scenario_entity(max_clients)])["ChannelData"]
        fetcher.values = {"MaxClients": Ok(32), "Codec": Ok(0)}

        channel = ChannelData.new(fetcher, ChannelId(7))
        expect(channel.get_max_clients()) == 32

        fetcher.values = {"MaxClients": Err(FetchError.NOT_CONNECTED)}
        channel.update()
        expect(channel.get_max_clients()) == 32

    def returns_read_only_views(expect, fetcher):
        members = BASE.name("members").type("map<string, int32>").fallible(False).initializer("{}")
        tags = BASE.name("tags").type("list<string>").initializer("Ok([])").updater('Ok(["a"])')
        ChannelData = gen_code([scenario_entity(members.finalize(), tags.finalize())])["ChannelData"]

        channel = ChannelData.new(fetcher, ChannelId(7))
        channel.members["x"] = 1
        channel.update_tags()

        view = channel.get_members()
        expect(dict(view)) == {"x": 1}
        with raises(TypeError):
            view["y"] = 2
        expect(channel.get_tags()) == Ok(("a",))

    def serves_the_api_view_through_the_data_handle(expect, fetcher):
        gen = gen_code([scenario_entity()])
        ChannelData, Channel = gen["ChannelData"], gen["Channel"]
        fetcher.values = {"Name": Ok("room1")}
        channel = ChannelData.new(fetcher, ChannelId(7))
        channel.update()

        expect(Channel(lambda: Ok(channel)).get_name()) == Ok("room1")
        expect(Channel(lambda: Err(FetchError.INVALID_ID)).get_name()) == Err(FetchError.NOT_READY)
        expect(hasattr(Channel(lambda: Ok(channel)), "get_id")) == False


def describe_update_from():
    def repairs_errored_fields_only(expect, fetcher):
        topic = BASE.name("topic").type("string").functions({"string": "fetch_str"}).finalize()
        ChannelData = gen_code([scenario_entity(topic)])["ChannelData"]
        codec = Err(FetchError.NOT_FETCHED)

        a = ChannelData(fetcher, id=1, name=Err(FetchError.NOT_READY), codec=codec, topic=Ok("hi"))
        b = ChannelData(fetcher, id=2, name=Ok("room1"), codec=codec, topic=Ok("bye"))
        a.update_from(b)

        expect(a.name) == Ok("room1")
        expect(a.topic) == Ok("hi")
        expect(a.id) == 1

    def follows_the_reconciliation_law(expect, fetcher):
        topic = BASE.name("topic").type("string").functions({"string": "fetch_str"}).finalize()
        ChannelData = gen_code([scenario_entity(topic)])["ChannelData"]
        outcomes = [Ok("x"), Ok("y"), Err(FetchError.NOT_READY), Err(FetchError.UNDEFINED)]

        for mine in outcomes:
            for theirs in outcomes:
                a = ChannelData(fetcher, id=1, name=mine, codec=mine, topic=mine)
                b = ChannelData(fetcher, id=2, name=theirs, codec=theirs, topic=theirs)
                a.update_from(b)
                expected = theirs if mine.is_err() else mine
                expect(a.name) == expected
                expect(a.codec) == expected
                expect(a.topic) == expected
