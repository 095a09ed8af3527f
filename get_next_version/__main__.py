from get_next_version.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
