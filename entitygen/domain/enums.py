"""Enums whose values the provider reports as raw integers."""

from entitygen.generator.builder import EnumBuilder
from entitygen.generator.types import EnumDescriptor


def create() -> list[EnumDescriptor]:
    enum = EnumBuilder()
    return [
        enum.name("CodecType")
        .documentation("Voice codec used in a channel.")
        .value("SPEEX_NARROWBAND", 0, "mono, 16bit, 8kHz, bitrate dependent on the quality setting")
        .value("SPEEX_WIDEBAND", 1, "mono, 16bit, 16kHz, bitrate dependent on the quality setting")
        .value("SPEEX_ULTRAWIDEBAND", 2, "mono, 16bit, 32kHz, bitrate dependent on the quality setting")
        .value("CELT_MONO", 3, "mono, 16bit, 48kHz, bitrate dependent on the quality setting")
        .value("OPUS_VOICE", 4, "mono, 16bit, 48kHz, optimized for voice")
        .value("OPUS_MUSIC", 5, "stereo, 16bit, 48kHz, optimized for music")
        .finalize(),
        enum.name("CodecEncryptionMode")
        .value("PER_CHANNEL", 0)
        .value("FORCED_OFF", 1)
        .value("FORCED_ON", 2)
        .finalize(),
        enum.name("HostbannerMode")
        .value("NO_ADJUST", 0)
        .value("IGNORE_ASPECT", 1)
        .value("KEEP_ASPECT", 2)
        .finalize(),
        enum.name("HostmessageMode")
        .documentation("How the server host message is presented to a joining client.")
        .value("NONE", 0, "Don't display anything")
        .value("LOG", 1, "Display message in the chat log")
        .value("MODAL", 2, "Display message in a modal dialog")
        .value("MODAL_QUIT", 3, "Display message in a modal dialog and close the connection")
        .finalize(),
        enum.name("TalkStatus")
        .value("NOT_TALKING", 0)
        .value("TALKING", 1)
        .value("TALKING_WHILE_DISABLED", 2)
        .finalize(),
        enum.name("MuteInputStatus").value("NONE", 0).value("MUTED", 1).finalize(),
        enum.name("MuteOutputStatus").value("NONE", 0).value("MUTED", 1).finalize(),
        enum.name("HardwareInputStatus").value("DISABLED", 0).value("ENABLED", 1).finalize(),
        enum.name("HardwareOutputStatus").value("DISABLED", 0).value("ENABLED", 1).finalize(),
        enum.name("InputDeactivationStatus").value("ACTIVE", 0).value("DEACTIVATED", 1).finalize(),
        enum.name("AwayStatus").value("NONE", 0).value("AWAY", 1).finalize(),
    ]
