from random_generator.server import main

if __name__ == "__main__":
    main()
