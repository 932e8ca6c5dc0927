"""Descriptors of the channel entity."""

from entitygen.generator.builder import EntityBuilder, PropertyBuilder
from entitygen.generator.types import EntityDescriptor

# Map types to the fetch functions that return them
DEFAULT_FUNCTIONS = {
    "int32": "get_channel_property_as_int",
    "uint64": "get_channel_property_as_uint64",
    "string": "get_channel_property_as_string",
}

REINTERPRETABLE = ["CodecType", "HostbannerMode"]


def create() -> list[EntityDescriptor]:
    builder = (
        PropertyBuilder.new()
        .functions(DEFAULT_FUNCTIONS)
        .reinterpretable(REINTERPRETABLE)
        .args("server_id, id, ")
        .update_args("self.server_id, self.id, ")
        .namespace("ChannelProperties")
    )
    builder_string = builder.type("string")
    builder_i32 = builder.type("int32")
    builder_bool = builder.type("bool")

    channel = (
        EntityBuilder.new()
        .name("ChannelData")
        .api_name("Channel")
        .with_api(True)
        .constructor_args(("server_id", "ServerId"), ("id", "ChannelId"))
        .properties(
            [
                builder.name("id").type("ChannelId").fallible(False).api(False).finalize(),
                builder.name("server_id").type("ServerId").fallible(False).api(False).finalize(),
                builder.name("parent_channel_id")
                .type("ChannelId")
                .updater("self._fetcher.query_parent_channel_id(self.server_id, self.id)")
                .documentation("The id of the parent channel, 0 if there is no parent channel")
                .api(False)
                .finalize(),
                builder_string.name("name").finalize(),
                builder_string.name("topic").finalize(),
                builder.name("codec").type("CodecType").finalize(),
                builder_i32.name("codec_quality").finalize(),
                builder_i32.name("max_clients").finalize(),
                builder_i32.name("max_family_clients").finalize(),
                builder_i32.name("order").finalize(),
                builder_bool.name("permanent").variant("FlagPermanent").finalize(),
                builder_bool.name("semi_permanent").variant("FlagSemiPermanent").finalize(),
                builder_bool.name("default").variant("FlagDefault").finalize(),
                builder_bool.name("password").variant("FlagPassword").finalize(),
                builder_i32.name("codec_latency_factor").finalize(),
                builder_bool.name("codec_is_unencrypted").finalize(),
                builder_i32.name("delete_delay").finalize(),
                builder_bool.name("max_clients_unlimited")
                .variant("FlagMaxClientsUnlimited")
                .finalize(),
                builder_bool.name("max_family_clients_unlimited")
                .variant("FlagMaxFamilyClientsUnlimited")
                .finalize(),
                builder_bool.name("subscribed")
                .variant("FlagAreSubscribed")
                .documentation("If we are subscribed to this channel")
                .finalize(),
                builder_i32.name("needed_talk_power").finalize(),
                builder_i32.name("forced_silence").finalize(),
                builder_string.name("phonetic_name").variant("NamePhonetic").finalize(),
                builder_i32.name("icon_id").finalize(),
                builder_string.name("banner_gfx_url").variant("BannerGfxUrl").finalize(),
                builder.name("banner_mode").variant("BannerMode").type("HostbannerMode").finalize(),
                builder_string.name("description").finalize(),
            ]
        )
        .finalize()
    )

    return [channel]
