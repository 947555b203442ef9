"""User-facing notifications shown with `rofi -e`."""

ADD_QUEUE_ERROR = "Failed to add the track to the queue. Try again."
PLAY_TRACK_ERROR = "Failed to play the track. Try again."
PLAY_ALBUM_ERROR = "Failed to play the album. Try again."
PLAY_PLAYLIST_ERROR = "Failed to play the playlist. Try again."
GET_ALBUM_ERROR = "Failed to get the album. Try again."
GET_ALBUMS_ERROR = "Failed to get albums. Try again."
GET_PLAYLISTS_ERROR = "Failed to get playlists. Try again."
GET_TRACKS_ERROR = "Failed to get tracks. Try again."
SELECT_DEVICE_ERROR = "Failed to select the device. Try again."
GET_DEVICES_ERROR = "Failed to get available devices. Try again."
NO_DEVICES_FOUND = "No devices found."
GET_PLAYER_STATE_ERROR = "Failed to get player status. Try again."
PLAY_PAUSE_ERROR = "Failed to pause/resume. Try again."
SKIP_TRACK_ERROR = "Failed to skip track. Try again."
PREVIOUS_TRACK_ERROR = "Failed to go to previous track. Try again."
UPDATE_PLAYER_ERROR = "Failed to update player. Try again."
GET_QUEUE_ERROR = "Failed to get queue. Try again."
QUEUE_EMPTY = "Queue is empty."
GET_RECENTLY_PLAYED_ERROR = "Failed to get recently played tracks. Try again."
NO_RECENTLY_PLAYED = "No recently played tracks."
SEARCH_ERROR = "Failed to search. Try again."
SEARCH_EMPTY = "Search cannot be empty."
NOTHING_PLAYING = "Nothing is currently playing."
