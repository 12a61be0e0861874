"""Allow running mastoclient with `python -m mastoclient`."""
from mastoclient.main import run

if __name__ == "__main__":
    run()
