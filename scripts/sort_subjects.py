"""Print the level 1 and 2 subjects in the user's lesson presentation order."""

import json
import logging

from wanikani_api import SubjectFilter, WKClient
from wanikani_api.config import LOG_LEVEL
from wanikani_api.services import fetch_all, sort_subjects


def main():
    logging.basicConfig(level=LOG_LEVEL)
    client = WKClient()

    order = client.get_user_information().data.preferences.lessons_presentation_order
    subjects = fetch_all(client, client.get_subjects(SubjectFilter(levels=[1, 2])))

    print(json.dumps(
        {
            "order": order.value,
            "subjects": [
                subject.model_dump(mode="json", by_alias=True)
                for subject in sort_subjects(subjects, order)
            ],
        },
        ensure_ascii=False,
        indent=2,
    ))


if __name__ == "__main__":
    main()
