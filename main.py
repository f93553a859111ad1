from component_builder.main import app, run  # expose FastAPI app

if __name__ == "__main__":
    run()
