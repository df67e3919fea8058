"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- channels/ → list_channels (guest-filtered)
- messages/ → list_channel_messages, list_all_messages
- dm/       → get_dm_thread
- users/    → list_users
"""
