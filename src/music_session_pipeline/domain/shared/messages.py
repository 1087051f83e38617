"""Centralized message constants for error messages, log templates, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Discord ID Validation Errors
    INVALID_SNOWFLAKE = "Discord snowflake ID must be positive"
    SNOWFLAKE_TOO_LARGE = "Discord snowflake ID exceeds maximum value (2^64)"

    # Queue Errors
    QUEUE_DELETED = "Queue for guild {guild_id} has been deleted"
    QUEUE_FULL = "Queue is full (max {max_size} items)"
    UNKNOWN_REPEAT_MODE = "Unknown repeat mode: {value}"

    # Settings Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    # Authentication/Startup Errors
    DISCORD_TOKEN_REQUIRED = "DISCORD_TOKEN environment variable is required"
    BOT_NOT_INITIALIZED = "Bot not initialized. Call set_bot() first."
    CONTAINER_NOT_FOUND = "Container not found on bot instance"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Pipeline
    PIPELINE_RECEIVED = "[%s] Received command '%s' in guild %s from user %s"
    PIPELINE_UNKNOWN_COMMAND = "[%s] No handler registered for command '%s'"
    PIPELINE_VALIDATION_FAILED = "[%s] Validation failed for '%s': %s"
    PIPELINE_VALIDATORS_PASSED = "[%s] Validators passed for '%s'"
    PIPELINE_OUTCOME = "[%s] Command '%s' finished with %s outcome"
    PIPELINE_UNHANDLED_ERROR = "[%s] Unhandled error while executing '%s'"

    # Validators
    VALIDATOR_FAILED = "[%s] Validator %s rejected the command (%s)"

    # Queue State Machine
    REPEAT_MODE_CONFLICT = "[%s] Repeat mode is already %s in guild %s"
    REPEAT_MODE_CHANGED = "[%s] Repeat mode changed from %s to %s in guild %s"
    REPEAT_MODE_MISMATCH = (
        "[%s] Failed to change repeat mode in guild %s: requested %s, read back %s"
    )
    REPEAT_MODE_SESSION_GONE = "[%s] Repeat mode change rejected, queue for guild %s is deleted"
    QUEUE_DELETED = "Deleted queue for guild %s"
    QUEUE_ALREADY_DELETED = "Queue for guild %s already deleted, skipping"

    # Handlers
    LEAVE_DELETING_QUEUE = "[%s] Deleting queue for guild %s"
    LOOP_REPORTING_CURRENT = "[%s] No mode input was provided, reporting current mode %s"

    # Response Emitter
    EMITTER_FAILED = "[%s] Failed to build response for %s outcome, using fallback"

    # Session Registry / Lifecycle
    SESSION_CREATED = "Created session for guild %s in channel %s"
    SESSION_ITEM_QUEUED = "Queued '%s' (%s) in guild %s at position %s"
    SESSION_REMOVED = "Removed session for guild %s"
    SESSION_NOT_FOUND = "No session found for guild %s"
    SESSION_TRACK_ADVANCED = "Advanced to '%s' in guild %s (repeat=%s)"
    SESSION_PLAYBACK_EXHAUSTED = "Playback finished in guild %s with no continuation, tearing down"

    # Voice
    VOICE_DISCONNECTED = "Disconnected from voice in guild %s"
    VOICE_NOT_CONNECTED = "Not connected to voice in guild %s"
    VOICE_DISCONNECT_FAILED = "Failed to disconnect from voice in guild %s"

    # Application Lifecycle
    LOGGING_CONFIG_FALLBACK = "Could not load %s, using basic logging config"
    BOT_STARTING = "Starting music session bot in {environment} mode"
    BOT_SETUP = "Setting up bot..."
    BOT_SETUP_COMPLETE = "Bot setup complete"
    BOT_STARTING_RUN = "Starting bot..."
    BOT_STOPPED = "Bot stopped successfully"
    BOT_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down..."
    BOT_FATAL_ERROR = "Fatal error: %s"
    BOT_READY = "Bot ready as %s (%s)"

    # Bot Cog Management
    BOT_COG_LOADED = "Loaded cog: %s"
    BOT_COG_LOAD_FAILED = "Failed to load cog %s: %s"

    # Bot Command Sync
    BOT_SYNCED_GUILD = "Synced %s commands to guild %s"
    BOT_SYNCED_GLOBAL = "Synced %s commands globally"
    BOT_SYNC_ON_STARTUP_FAILED = "Failed to sync commands on startup: %s"

    # Bot Error Handling
    BOT_SLASH_COMMAND_ERROR = "Slash command error in '%s': %s"
    BOT_ERROR_REPLY_FAILED = "Could not report error for '%s' to the user: %s"


class ValidationMessages:
    """Titles and bodies shown when a precondition rejects a command."""

    NOT_IN_VOICE_TITLE = "Not in a voice channel"
    NOT_IN_VOICE_BODY = (
        "You cannot use this command without being in a voice channel.\n\n"
        "_Please join a voice channel and try again._"
    )

    NOT_SAME_CHANNEL_TITLE = "Not in same voice channel"
    NOT_SAME_CHANNEL_BODY = (
        "I am already playing in another voice channel.\n\n"
        "_Join <#{channel_id}> to use this command._"
    )

    NO_QUEUE_TITLE = "Oops!"
    NO_QUEUE_BODY = (
        "There are no tracks in the queue and nothing is currently playing.\n\n"
        "First add some tracks with **`/play`**!"
    )


class CommandMessages:
    """Titles and bodies for command outcomes."""

    LEAVE_TITLE = "Leaving channel"
    LEAVE_BODY = (
        "Cleared the track queue and left voice channel.\n\n"
        "To play more music, use the **`/play`** command!"
    )

    LOOP_CURRENT_TITLE = "Current loop mode"
    LOOP_CURRENT_BODY = "The looping mode is currently set to **`{mode}`**."

    LOOP_ALREADY_SET_TITLE = "Oops!"
    LOOP_ALREADY_SET_BODY = "Loop mode is already **`{mode}`**."

    LOOP_FAILED_TITLE = "Uh-oh... Failed to change loop mode!"
    LOOP_FAILED_BODY = (
        "I tried to change the loop mode to **`{mode}`**, but something went wrong.\n\n"
        "You can try to perform the command again.\n\n"
        "_If you think this message is incorrect or the issue persists, please submit a "
        "bug report in the **[support server]({support_url})**._"
    )

    LOOP_CHANGE_LINE = "Changing loop mode from **`{previous}`** to **`{mode}`**."
    LOOP_DISABLED_TITLE = "Loop mode disabled"
    LOOP_DISABLED_BODY = LOOP_CHANGE_LINE + "\n\nThe {previous} will no longer play on repeat!"
    LOOP_AUTOPLAY_TITLE = "Loop mode changed"
    LOOP_AUTOPLAY_BODY = (
        LOOP_CHANGE_LINE + "\n\nWhen the queue is empty, similar tracks will start playing!"
    )
    LOOP_ENABLED_TITLE = "Loop mode changed"
    LOOP_ENABLED_BODY = LOOP_CHANGE_LINE + "\n\nThe {mode} will now play on repeat!"

    UNEXPECTED_ERROR_TITLE = "Uh-oh... Something went wrong!"
    UNEXPECTED_ERROR_BODY = (
        "There was an unexpected error while trying to perform this command.\n\n"
        "_If the issue persists, please submit a bug report in the "
        "**[support server]({support_url})**._"
    )

    FALLBACK_TITLE = "Uh-oh..."
    FALLBACK_BODY = "Something went wrong while preparing the response."

    UNKNOWN_COMMAND_TITLE = "Unknown command"
    UNKNOWN_COMMAND_BODY = "I don't know how to handle **`/{name}`**."


class DiscordUIMessages:
    """User-facing Discord messages outside the command pipeline."""

    STATE_SERVER_ONLY = "This command can only be used in a server."
    ERROR_COMMAND_FAILED_SEE_LOGS = "❌ Command failed. See logs."
    EXECUTION_ID_FOOTER = "Execution ID: {correlation_id}"
