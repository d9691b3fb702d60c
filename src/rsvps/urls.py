RSVP_URL = "/rsvp"
RSVP_ATTENDING_URL = "/rsvp/attending/yes"
RSVP_NOT_ATTENDING_URL = "/rsvp/attending/no"
RSVP_EVENT_INFO_URL = "/rsvp/event-info"
RSVP_SUMMARY_URL = "/rsvp/summary"
RSVP_BY_ID_URL = "/rsvp/{rsvp_id}"
RSVP_BY_TOKEN_URL = "/rsvp/token/{token}"

# route name used to build guest update links
RSVP_BY_TOKEN_ROUTE = "get_rsvp_by_token"
