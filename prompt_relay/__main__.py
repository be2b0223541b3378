from prompt_relay.main import run

run()
