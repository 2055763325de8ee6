from tradins_api.main import run

run()
