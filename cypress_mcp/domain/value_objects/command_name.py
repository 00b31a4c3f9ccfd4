from enum import Enum


class CommandName(str, Enum):
    """Operations the dispatcher knows how to route.

    Values are matched verbatim against the security allow-list.
    """

    RUN = "run"
    OPEN = "open"
    VALIDATE = "validate"
    GENERATE = "generate"
    GET_RESULTS = "getResults"
    GET_SCREENSHOTS = "getScreenshots"
    GET_VIDEOS = "getVideos"
