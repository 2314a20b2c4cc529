import sys
from pathlib import Path

from streamlit.web import cli as stcli

APP_PATH = Path(__file__).with_name("app.py")


def main(argv=None):
    """Launch the app with ``streamlit run``, passing extra args through."""
    args = sys.argv[1:] if argv is None else list(argv)
    sys.argv = ["streamlit", "run", str(APP_PATH), *args]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
