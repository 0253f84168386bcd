"""Download every radical and kanji subject and print them as JSON."""

import json
import logging

from wanikani_api import SubjectFilter, WKClient
from wanikani_api.config import LOG_LEVEL
from wanikani_api.models import SubjectType
from wanikani_api.services import fetch_all


def main():
    logging.basicConfig(level=LOG_LEVEL)
    client = WKClient()

    filters = SubjectFilter(types=[SubjectType.RADICAL, SubjectType.KANJI])
    first_page = client.get_subjects(filters)
    subjects = fetch_all(client, first_page)

    print(json.dumps(
        [subject.model_dump(mode="json", by_alias=True) for subject in subjects],
        ensure_ascii=False,
        indent=2,
    ))


if __name__ == "__main__":
    main()
