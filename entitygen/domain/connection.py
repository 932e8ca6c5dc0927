"""Descriptors of the connection entity and its helper records."""

from entitygen.generator.builder import EntityBuilder, PropertyBuilder
from entitygen.generator.types import EntityDescriptor, PropertyDescriptor

# Map types to the fetch functions that return them
DEFAULT_FUNCTIONS = {
    "int32": "get_connection_property_as_uint64",
    "uint64": "get_connection_property_as_uint64",
    "uint16": "get_connection_property_as_uint64",
    "string": "get_connection_property_as_string",
    "ChannelId": "get_connection_property_as_uint64",
}

CLIENT_FUNCTIONS = {
    "int32": "get_client_property_as_int",
    "uint64": "get_client_property_as_uint64",
    "string": "get_client_property_as_string",
    "ChannelId": "get_client_property_as_uint64",
}

REINTERPRETABLE = [
    "InputDeactivationStatus",
    "TalkStatus",
    "MuteInputStatus",
    "MuteOutputStatus",
    "HardwareInputStatus",
    "HardwareOutputStatus",
    "AwayStatus",
]

NETWORK_KINDS = ["speech", "keepalive", "control", "total"]


def _network_properties(builder: PropertyBuilder) -> list[PropertyDescriptor]:
    """Per packet kind counters, e.g. packets_sent_speech ... bandwidth_received_last_minute_total."""
    props: list[PropertyDescriptor] = []
    for prefix in [
        "packets_sent",
        "bytes_sent",
        "packets_received",
        "bytes_received",
        "packetloss",
    ]:
        props.extend(builder.name(f"{prefix}_{kind}").finalize() for kind in NETWORK_KINDS)
    for name, variant in [
        ("server_to_client_packetloss", "Server2ClientPacketloss"),
        ("client_to_server_packetloss", "Client2ServerPacketloss"),
    ]:
        props.extend(
            builder.name(f"{name}_{kind}").variant(f"{variant}{kind.capitalize()}").finalize()
            for kind in NETWORK_KINDS
        )
    for prefix in [
        "bandwidth_sent_last_second",
        "bandwidth_sent_last_minute",
        "bandwidth_received_last_second",
        "bandwidth_received_last_minute",
    ]:
        props.extend(builder.name(f"{prefix}_{kind}").finalize() for kind in NETWORK_KINDS)
    return props


def create() -> list[EntityDescriptor]:
    builder = (
        PropertyBuilder.new()
        .functions(DEFAULT_FUNCTIONS)
        .reinterpretable(REINTERPRETABLE)
        .args("server_id, id, ")
        .update_args("self.server_id, self.id, ")
        .namespace("ConnectionProperties")
    )
    builder_string = builder.type("string")
    builder_i32 = builder.type("int32")
    builder_u64 = builder.type("uint64")

    client_b = builder.namespace("ClientProperties").functions(CLIENT_FUNCTIONS)
    client_b_string = client_b.type("string")
    client_b_i32 = client_b.type("int32")
    client_b_bool = client_b.type("bool")

    ids = [
        builder.name("id").type("ConnectionId").fallible(False).api(False).finalize(),
        builder.name("server_id").type("ServerId").fallible(False).api(False).finalize(),
    ]
    record = EntityBuilder.new().constructor_args(("server_id", "ServerId"), ("id", "ConnectionId"))

    own_connection_data = (
        record.name("OwnConnectionData")
        .documentation("Connection data that is only available for our own connection")
        .properties(
            [
                *ids,
                builder_string.name("server_ip").finalize(),
                builder.name("server_port").type("uint16").finalize(),
                builder.name("input_deactivated").type("InputDeactivationStatus").finalize(),
                builder.name("default_channel").type("ChannelId").finalize(),
                builder_string.name("default_token").finalize(),
            ]
        )
        .finalize()
    )

    serverquery_connection_data = (
        record.name("ServerqueryConnectionData")
        .properties(
            [
                *ids,
                builder_string.name("name").finalize(),
                builder_string.name("password").finalize(),
            ]
        )
        .finalize()
    )

    optional_connection_data = (
        record.name("OptionalConnectionData")
        .documentation("Connection data that has to be requested from the server")
        .properties(
            [
                *ids,
                builder_string.name("version").finalize(),
                builder_string.name("platform").finalize(),
                builder.name("created").type("timestamp").finalize(),
                builder.name("last_connected").type("timestamp").finalize(),
                builder_i32.name("total_connection").finalize(),
                builder.name("ping").type("duration").finalize(),
                builder.name("ping_deviation").type("duration").finalize(),
                builder.name("connected_time").type("duration").finalize(),
                builder.name("idle_time").type("duration").finalize(),
                builder_string.name("client_ip").finalize(),
                builder.name("client_port").type("uint16").finalize(),
                *_network_properties(builder_u64),
                builder_i32.name("month_bytes_uploaded").finalize(),
                builder_i32.name("month_bytes_downloaded").finalize(),
                builder_i32.name("total_bytes_uploaded").finalize(),
                builder_i32.name("total_bytes_downloaded").finalize(),
                client_b_string.name("default_channel_password").finalize(),
                client_b_string.name("server_password").finalize(),
                client_b_bool.name("is_muted").documentation("If the client is locally muted.").finalize(),
                client_b_i32.name("volume_modificator").finalize(),
                client_b_bool.name("version_sign").finalize(),
                client_b_bool.name("avatar").variant("FlagAvatar").finalize(),
                client_b_string.name("description").finalize(),
                client_b_bool.name("talker").variant("IsTalker").finalize(),
                client_b_bool.name("priority_speaker").variant("IsPrioritySpeaker").finalize(),
                client_b_bool.name("unread_messages").finalize(),
                client_b_i32.name("needed_serverquery_view_power").finalize(),
                client_b_i32.name("icon_id").finalize(),
                client_b_bool.name("is_channel_commander").finalize(),
                client_b_string.name("country").finalize(),
                client_b_string.name("badges").finalize(),
            ]
        )
        .finalize()
    )

    # The real connection data, only reachable through the Connection view
    builder = builder.public(False)
    client_b = client_b.public(False)
    client_b_string = client_b_string.public(False)
    connection = (
        EntityBuilder.new()
        .name("ConnectionData")
        .api_name("Connection")
        .public(False)
        .with_api(True)
        .constructor_args(("server_id", "ServerId"), ("id", "ConnectionId"))
        .extra_initialization(
            "optional_data = OptionalConnectionData.new(fetcher, server_id, id)\n"
            "own_data = None\n"
            "serverquery_data = None\n"
        )
        .properties(
            [
                builder.name("id").type("ConnectionId").fallible(False).api(False).finalize(),
                builder.name("server_id").type("ServerId").fallible(False).api(False).finalize(),
                builder.name("channel_id")
                .type("ChannelId")
                .updater("self._fetcher.query_channel_id(self.server_id, self.id)")
                .api(False)
                .finalize(),
                client_b_string.name("uid").variant("UniqueIdentifier").finalize(),
                client_b_string.name("name").variant("Nickname").finalize(),
                client_b.name("talking").type("TalkStatus").variant("FlagTalking").finalize(),
                client_b.name("whispering")
                .type("bool")
                .updater("self._fetcher.query_whispering(self.server_id, self.id)")
                .finalize(),
                client_b.name("away").type("AwayStatus").finalize(),
                client_b_string.name("away_message").finalize(),
                client_b.name("input_muted").type("MuteInputStatus").finalize(),
                client_b.name("output_muted").type("MuteOutputStatus").finalize(),
                client_b.name("output_only_muted").type("MuteOutputStatus").finalize(),
                client_b.name("input_hardware").type("HardwareInputStatus").finalize(),
                client_b.name("output_hardware").type("HardwareOutputStatus").finalize(),
                client_b_string.name("phonetic_name").variant("NicknamePhonetic").finalize(),
                client_b.name("recording").type("bool").variant("IsRecording").finalize(),
                client_b.name("database_id")
                .type("permissions")
                .should_update(False)
                .documentation("Only valid data if we have the appropriate permissions.")
                .finalize(),
                client_b.name("channel_group_id").type("permissions").should_update(False).finalize(),
                client_b.name("server_groups").type("list<permissions>").should_update(False).finalize(),
                client_b.name("talk_power").type("int32").finalize(),
                client_b.name("talk_request")
                .type("timestamp")
                .documentation("When this client requested to talk")
                .finalize(),
                client_b_string.name("talk_request_message").variant("TalkRequestMsg").finalize(),
                client_b.name("channel_group_inherited_channel_id")
                .type("ChannelId")
                .api(False)
                .documentation("The channel that sets the current channel id of this client.")
                .finalize(),
                client_b.name("own_data")
                .type("optional<OwnConnectionData>")
                .fallible(False)
                .initialize(False)
                .api(False)
                .documentation("Only set for oneself")
                .finalize(),
                client_b.name("serverquery_data")
                .type("optional<ServerqueryConnectionData>")
                .fallible(False)
                .initialize(False)
                .api(False)
                .documentation("Only available for serverqueries")
                .finalize(),
                client_b.name("optional_data")
                .type("OptionalConnectionData")
                .fallible(False)
                .initialize(False)
                .api(False)
                .finalize(),
            ]
        )
        .finalize()
    )

    return [own_connection_data, serverquery_connection_data, optional_connection_data, connection]
