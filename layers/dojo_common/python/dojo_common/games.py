import os

import boto3
from botocore.exceptions import ClientError

from dojo_common.errors import ApiError, wrap

# ========= ENV VARS =========
GAMES_TABLE = os.environ.get("GAMES_TABLE", "dev-games")


class GameRepository:
    """
    Games table access. Items are keyed by cohort (partition) and id (sort)
    and carry the owner's username in `owner`.
    """

    def __init__(self, table):
        self.table = table

    @classmethod
    def from_env(cls):
        dynamodb = boto3.resource("dynamodb")
        return cls(dynamodb.Table(GAMES_TABLE))

    def delete_game(self, owner: str, cohort: str, game_id: str) -> dict:
        """
        Delete the game if owner owns it and return the deleted item.
        Raises ApiError(404) when the game does not exist or belongs to someone else.
        """
        try:
            resp = self.table.delete_item(
                Key={"cohort": cohort, "id": game_id},
                ConditionExpression="attribute_exists(id) AND #owner = :owner",
                ExpressionAttributeNames={"#owner": "owner"},
                ExpressionAttributeValues={":owner": owner},
                ReturnValues="ALL_OLD",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise wrap(
                    404,
                    "Invalid request: game not found or you do not own it",
                    "DynamoDB conditional check failed",
                    e,
                ) from e
            raise wrap(500, "Temporary server error", "Failed DynamoDB DeleteItem call", e) from e

        item = resp.get("Attributes")
        if not item:
            # ALL_OLD always returns the item when the condition held
            raise ApiError(500, "Temporary server error", "DeleteItem returned no attributes")
        return item
