"""Internal constants shared across the library."""

# Key the mobile app writes the serialized snapshot under.
WIDGET_STORAGE_KEY = "widget_data"

# Name of the shared preferences file the app's storage plugin writes to.
DEFAULT_PREFERENCES_NAME = "CapacitorStorage"

# Shown in the stock slot when no snapshot was ever stored.
NO_DATA_PLACEHOLDER = "--"

# Prefix of the subtitle slot, followed by today's inbound count.
INBOUND_SUBTITLE_LABEL = "总库存 · 今日入库 "

LAST_UPDATED_FORMAT = "%H:%M:%S"
