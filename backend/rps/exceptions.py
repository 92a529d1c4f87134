"""Room server exceptions."""


class RPSException(Exception):
    """Base class for room server errors."""
    pass


class RoomFull(RPSException):
    """The room already seats two players."""
    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__(f"Room {room_id} is full")
