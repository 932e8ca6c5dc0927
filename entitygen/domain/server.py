"""Descriptors of the server entity and its helper records."""

from entitygen.generator.builder import EntityBuilder, PropertyBuilder
from entitygen.generator.types import EntityDescriptor

# Map types to the fetch functions that return them
DEFAULT_FUNCTIONS = {
    "int32": "get_server_property_as_int",
    "string": "get_server_property_as_string",
}

REINTERPRETABLE = ["CodecEncryptionMode", "HostbannerMode", "HostmessageMode"]


def create() -> list[EntityDescriptor]:
    builder = (
        PropertyBuilder.new()
        .functions(DEFAULT_FUNCTIONS)
        .reinterpretable(REINTERPRETABLE)
        .args("id, ")
        .update_args("self.id, ")
        .namespace("VirtualServerProperties")
    )
    builder_string = builder.type("string")
    builder_i32 = builder.type("int32")
    builder_bool = builder.type("bool")
    builder_duration = builder.type("duration")

    optional_server_data = (
        EntityBuilder.new()
        .name("OptionalServerData")
        .documentation("Server properties that have to be fetched explicitly")
        .constructor_args(("id", "ServerId"))
        .properties(
            [
                builder.name("id").type("ServerId").fallible(False).api(False).finalize(),
                builder_string.name("welcome_message").finalize(),
                builder_i32.name("max_clients").finalize(),
                builder_i32.name("clients_online").finalize(),
                builder_i32.name("channels_online").finalize(),
                builder_i32.name("client_connections").finalize(),
                builder_i32.name("query_client_connections").finalize(),
                builder_i32.name("query_clients_online").finalize(),
                builder_duration.name("uptime").finalize(),
                builder_bool.name("password").finalize(),
                builder_i32.name("max_download_total_bandwith").finalize(),
                builder_i32.name("max_upload_total_bandwith").finalize(),
                builder_i32.name("download_quota").finalize(),
                builder_i32.name("upload_quota").finalize(),
                builder_i32.name("month_bytes_downloaded").finalize(),
                builder_i32.name("month_bytes_uploaded").finalize(),
                builder_i32.name("total_bytes_downloaded").finalize(),
                builder_i32.name("total_bytes_uploaded").finalize(),
                builder_i32.name("complain_autoban_count").finalize(),
                builder_duration.name("complain_autoban_time").finalize(),
                builder_duration.name("complain_remove_time").finalize(),
                builder_i32.name("min_clients_in_channel_before_forced_silence").finalize(),
                builder_i32.name("antiflood_points_tick_reduce").finalize(),
                builder_i32.name("antiflood_points_needed_command_block").finalize(),
                builder_i32.name("antiflood_points_needed_ip_block").finalize(),
                builder_i32.name("port").finalize(),
                builder_bool.name("autostart").finalize(),
                builder_i32.name("machine_id").finalize(),
                builder_i32.name("needed_identity_security_level").finalize(),
                builder_bool.name("log_client").finalize(),
                builder_bool.name("log_query").finalize(),
                builder_bool.name("log_channel").finalize(),
                builder_bool.name("log_permissions").finalize(),
                builder_bool.name("log_server").finalize(),
                builder_bool.name("log_filetransfer").finalize(),
                builder_string.name("min_client_version").finalize(),
                builder_i32.name("total_packetloss_speech").finalize(),
                builder_i32.name("total_packetloss_keepalive").finalize(),
                builder_i32.name("total_packetloss_control").finalize(),
                builder_i32.name("total_packetloss_total").finalize(),
                builder_i32.name("total_ping").finalize(),
                builder_bool.name("weblist_enabled").finalize(),
            ]
        )
        .finalize()
    )

    # Only created together with the server, see its extra initialization
    outdated_server_data = (
        EntityBuilder.new()
        .name("OutdatedServerData")
        .documentation("Server properties that are available at the start but not updated")
        .with_update(False)
        .with_constructor(False)
        .properties(
            [
                builder_string.name("hostmessage").finalize(),
                builder.name("hostmessage_mode").type("HostmessageMode").finalize(),
            ]
        )
        .finalize()
    )

    # The real server data, only reachable through the Server view
    builder = builder.public(False)
    builder_string = builder_string.public(False)
    builder_i32 = builder_i32.public(False)
    builder_duration = builder_duration.public(False)
    server = (
        EntityBuilder.new()
        .name("ServerData")
        .api_name("Server")
        .public(False)
        .with_api(True)
        .constructor_args(("id", "ServerId"))
        .extra_attributes("outdated_data: OutdatedServerData\n")
        .extra_methods(
            "def get_outdated_data(self) -> OutdatedServerData:\n"
            "    return self.outdated_data\n"
        )
        .extra_initialization(
            "# These attributes are not in the main struct\n"
            "hostmessage_mode = fetcher.get_server_property_as_int(\n"
            '    id, PropertyKey("VirtualServerProperties", "HostmessageMode")\n'
            ").and_then(HostmessageMode.decode)\n"
            "hostmessage = fetcher.get_server_property_as_string(\n"
            '    id, PropertyKey("VirtualServerProperties", "Hostmessage")\n'
            ")\n"
        )
        .extra_creation(
            "outdated_data=OutdatedServerData(\n"
            "    fetcher,\n"
            "    hostmessage=hostmessage,\n"
            "    hostmessage_mode=hostmessage_mode,\n"
            "),\n"
        )
        .properties(
            [
                builder.name("id")
                .type("ServerId")
                .fallible(False)
                .initializer("id")
                .should_update(False)
                .api(False)
                .finalize(),
                builder_string.name("uid").variant("UniqueIdentifier").finalize(),
                builder.name("own_connection_id")
                .type("ConnectionId")
                .updater("self._fetcher.query_own_connection_id(self.id)")
                .api(False)
                .finalize(),
                builder_string.name("name").finalize(),
                builder_string.name("phonetic_name").variant("NamePhonetic").finalize(),
                builder_string.name("platform").finalize(),
                builder_string.name("version").finalize(),
                builder.name("created").type("timestamp").finalize(),
                builder.name("codec_encryption_mode").type("CodecEncryptionMode").finalize(),
                # TODO: query the groups once the fetch layer exposes them
                builder.name("default_server_group")
                .type("permissions")
                .updater("Ok(Permissions())")
                .finalize(),
                builder.name("default_channel_group")
                .type("permissions")
                .updater("Ok(Permissions())")
                .finalize(),
                builder.name("default_channel_admin_group")
                .type("permissions")
                .updater("Ok(Permissions())")
                .finalize(),
                builder_string.name("hostbanner_url").finalize(),
                builder_string.name("hostbanner_gfx_url").finalize(),
                builder_duration.name("hostbanner_gfx_interval").finalize(),
                builder.name("hostbanner_mode").type("HostbannerMode").finalize(),
                builder_i32.name("priority_speaker_dimm_modificator").finalize(),
                builder_string.name("hostbutton_tooltip").finalize(),
                builder_string.name("hostbutton_url").finalize(),
                builder_string.name("hostbutton_gfx_url").finalize(),
                builder_i32.name("icon_id").finalize(),
                builder_i32.name("reserved_slots").finalize(),
                builder.name("ask_for_privilegekey").type("bool").finalize(),
                builder_duration.name("channel_temp_delete_delay_default").finalize(),
                builder.name("visible_connections")
                .type("map<ConnectionId, ConnectionData>")
                .fallible(False)
                .initializer("{}")
                .updater(
                    "self._fetcher.query_connections(self.id).unwrap_or(self.visible_connections)"
                )
                .api(False)
                .finalize(),
                builder.name("channels")
                .type("map<ChannelId, ChannelData>")
                .updater("self._fetcher.query_channels(self.id)")
                .api(False)
                .finalize(),
                builder.name("optional_data")
                .type("OptionalServerData")
                .fallible(False)
                .initializer("OptionalServerData.new(fetcher, id)")
                .should_update(False)
                .api(False)
                .documentation("Not refreshed by update(), call its own update() instead")
                .finalize(),
            ]
        )
        .finalize()
    )

    return [optional_server_data, outdated_server_data, server]
