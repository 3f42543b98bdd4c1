#!/usr/bin/env python3
"""
Demonstrate the search server on a small fixed corpus.

Prints which query words each document matches, the ranked results for a
query with an exclusion, and how many requests in a run came back empty.

Settings come from .env.local/.env (see search_server.config).
"""

import logging

from search_server import DocumentStatus, RequestQueue, SearchServer, load_settings, paginate
from search_server.logging_config import setup_logging

logger = logging.getLogger(__name__)


def print_match_document_result(document_id, words, status):
    print(f"{{ document_id = {document_id}, status = {status.value}, words = {' '.join(words)} }}")


def main():
    settings = load_settings()
    setup_logging(console_level=settings.console_level)

    search_server = SearchServer.from_settings("and in on", settings)
    search_server.add_document(0, "white cat and modern ring", DocumentStatus.ACTUAL, [8, -3])
    search_server.add_document(1, "puffy cat puffy tail cat", DocumentStatus.ACTUAL, [7, 2, 7])
    search_server.add_document(2, "nice dog cool eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    search_server.add_document(3, "nice bird jenny", DocumentStatus.BANNED, [9])
    logger.info(f"Indexed {search_server.document_count} demo documents")

    for document_id in search_server:
        words, status = search_server.match_document("puffy cat", document_id)
        print_match_document_result(document_id, words, status)

    print()
    results = search_server.find_top_documents("cat -white")
    print(len(results))
    for page in paginate(results, 2):
        print(" ".join(str(document) for document in page))
        print("Page break")

    request_queue = RequestQueue(search_server, capacity=settings.request_window_size)
    for query in ("empty request", "nice", "cat", "bird"):
        request_queue.add_find_request(query)
    request_queue.add_find_request("bird", DocumentStatus.BANNED)
    print(f"Total empty requests: {request_queue.no_result_count}")


if __name__ == "__main__":
    main()
