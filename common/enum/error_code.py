from enum import Enum

class APIError(Enum):
    # 1. 공통
    INTERNAL_SERVER_ERROR = ("C001", "Internal server error.", 500)
    INVALID_INPUT_VALUE  = ("C002", "Invalid input value.", 400)
    DB_ERROR = ("C003", "Error while talking to MongoDB.", 500)
    INVALID_ID = ("C004", "Not a valid ID.", 400)
    MISSING_FILE = ("C005", "Required file is missing.", 400)
    FORBIDDEN = ("C006", "You are not allowed to modify this resource.", 403)

    # 2. Auth
    AUTH_TOKEN_EXPIRED   = ("A001", "Access token has expired.", 401)
    AUTH_INVALID_TOKEN   = ("A002", "Invalid access token.", 401)

    # 3. User
    USER_NOT_FOUND       = ("U001", "User does not exist.", 404)

    # 4. Video
    VIDEO_NOT_FOUND      = ("V001", "Video not found.", 404)
    MEDIA_PROBE_FAIL     = ("V002", "Could not read video duration.", 500)

    # 5. Comment
    COMMENT_NOT_FOUND    = ("M001", "Could not find comment.", 404)

    # 6. Tweet
    TWEET_NOT_FOUND      = ("T001", "Tweet not found.", 404)

    # 7. Playlist
    PLAYLIST_NOT_FOUND   = ("P001", "Playlist does not exist.", 404)
    PLAYLIST_UPDATE_FAIL = ("P002", "Error while updating playlist in MongoDB.", 500)

    # 8. Object storage
    STORAGE_UPLOAD_FAIL  = ("S001", "Error while uploading file to storage.", 500)
    STORAGE_DELETE_FAIL  = ("S002", "Error while deleting file from storage.", 500)

    def __init__(self, code, message, status):
        self.code = code
        self.message = message
        self.status = status
