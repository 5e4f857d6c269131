"""
Entry point for the deployment configuration tool.
"""

import sys

from deploy_config.main import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n🛑 Interrupted by user")
        sys.exit(130)
