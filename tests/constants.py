"""
Shared constants for route API tests
"""

USER_ID = "11111111-1111-1111-1111-111111111111"
UNKNOWN_ROUTE_ID = "22222222-2222-2222-2222-222222222222"

CREATE_ROUTE_MUTATION = """
mutation CreateRoute($userId: UUID!) {
  createRoute(newRoute: {userId: $userId}) {
    id
    userId
    status
  }
}
"""

GET_ROUTE_QUERY = """
query GetRoute($id: UUID!) {
  route(id: $id) {
    id
    userId
    status
  }
}
"""

NOT_FOUND_MESSAGE = "unable to find route"
