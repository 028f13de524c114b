import os
from oleander.db.session import SessionLocal
from oleander.core.errors import NotFound
from oleander.services.users import create_user, get_user_by_username

def main(session_factory=SessionLocal):
    username = os.environ.get("SEED_USERNAME", "admin")
    body = {
        "first_name": os.environ.get("SEED_FIRST_NAME", "Admin"),
        "last_name": os.environ.get("SEED_LAST_NAME", "User"),
        "username": username,
        "pwd": os.environ.get("SEED_PWD", "admin123"),
    }

    db = session_factory()
    try:
        try:
            return get_user_by_username(db, username)
        except NotFound:
            pass
        return create_user(db, body)
    finally:
        db.close()

if __name__ == "__main__":
    main()
