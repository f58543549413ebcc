"""Flask front-end for the search engine (see frontend.web)."""
