#!/usr/bin/env python3
from roads2csv.orchestrator import main


if __name__ == "__main__":
    main()
