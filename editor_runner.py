# editor_runner.py
from mapeditor.app import main

# --- Main Execution ---
if __name__ == "__main__":
    main()
