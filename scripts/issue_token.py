import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from modules.auth.service import create_access_token

if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python scripts/issue_token.py <user_id>")
        sys.exit(1)
    print(create_access_token(int(sys.argv[1])))
