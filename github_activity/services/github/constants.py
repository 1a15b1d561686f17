"""Constants for the GitHub events API."""

# Public events endpoint, relative to the API base URL
USER_PUBLIC_EVENTS_PATH = "/users/{username}/events/public"

# Rate limit headers sent on every REST response
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"

# Event type discriminators with a dedicated rendering
PUSH_EVENT = "PushEvent"
CREATE_EVENT = "CreateEvent"
PULL_REQUEST_EVENT = "PullRequestEvent"
WATCH_EVENT = "WatchEvent"
