from discogs_gateway.main import run

run()
