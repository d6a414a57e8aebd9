"""Entry point for running the API as module: python -m veloraswap"""

# Load .env file before importing anything else
from dotenv import load_dotenv
load_dotenv()

from veloraswap.main import main

if __name__ == "__main__":
    main()
