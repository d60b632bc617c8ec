import sys

from google_travels_mcp.main import main

sys.exit(main())
