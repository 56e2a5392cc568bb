"""Debug entry point placeholder; task candidate debugging goes through the running app."""


def main() -> None:
    print("Debugging via existing app logic is safer.")


if __name__ == "__main__":
    main()
