"""Platform adapters: logging, filesystem helpers and the MusicBrainz client."""
