"""Flask front end serving the fuzzy scorers over HTTP."""
