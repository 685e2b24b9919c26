# Service layer for the snapclient config UI
# - origin:   backend/page origin resolution from the page URL
# - decoders: per-key text -> value decoding of /get responses
# - client:   HTTP client for the device parameter endpoints
# - feedback: loading/error markup helpers
