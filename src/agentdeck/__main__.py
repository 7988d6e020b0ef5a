"""Allow running agentdeck as a module: python -m agentdeck."""

from agentdeck.cli import main

if __name__ == "__main__":
    main()
