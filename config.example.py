# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing here is imported by the app; it exists so the repo documents its knobs
without opening src/planer/config.py.
"""

ENV_VARS = {
    # App / logging
    "PLANER_APP_NAME": "App display name (default: planer).",
    "PLANER_LOG_LEVEL": "Logging level (default: INFO; console shows WARNING+ at most).",
    # Local storage
    "PLANER_DATA_DIR": "Local data directory, also holds planer.log (default: .local/planer).",
    "PLANER_STORAGE_PATH": "Key/value JSON file (default: <data_dir>/storage.json).",
    "PLANER_STORAGE_KEY": "Key the task list is stored under (default: planerTasks).",
    # Remote mirror
    "PLANER_SYNC_ENABLED": "POST new tasks to the sync endpoint (true/false, default: true).",
    "PLANER_SYNC_URL": "Sync endpoint (default: https://jsonplaceholder.typicode.com/todos).",
    "PLANER_SYNC_TIMEOUT_SECONDS": "Optional request timeout (default: none).",
    # UI
    "PLANER_NOTIFICATION_SECONDS": "How long a notification stays (default: 3).",
    "PLANER_MAX_TASK_LENGTH": "Maximum task text length after trimming (default: 500).",
    "PLANER_HTML_SNAPSHOT_PATH": "If set, the rendered list is also written to this HTML file.",
}
