"""Terminal front end: input decoding, rendering and the command line."""
