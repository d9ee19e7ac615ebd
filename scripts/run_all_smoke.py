import sys


def main() -> None:
    # Ensure local package resolution
    sys.path.append('.')
    # Run catalog, pages and lookups
    import scripts.smoke_roadmaps as roadmaps
    roadmaps.main()
    # Run topic assistant
    import scripts.smoke_chat as chat
    chat.main()


if __name__ == "__main__":
    main()
