"""Print the lessons and reviews currently available, in local time."""

import logging

from wanikani_api import WKClient
from wanikani_api.config import LOG_LEVEL
from wanikani_api.services import get_formatted_summary


def main():
    logging.basicConfig(level=LOG_LEVEL)
    client = WKClient()

    user = client.get_user_information()
    print(f"{user.data.username} (level {user.data.level})")
    for line in get_formatted_summary(client.get_summary()):
        print(line)


if __name__ == "__main__":
    main()
