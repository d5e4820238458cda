from src.demo.showcase import main

if __name__ == "__main__":
    main()
