class QueryExecutionError(Exception):
    def __init__(self, statement: str, cause: Exception):
        super().__init__(f"query execution failed: {cause}")
        self.statement = statement
        self.cause = cause


class DuplicateUserError(Exception):
    def __init__(self, email: str):
        super().__init__(f"a user with email '{email}' already exists")
        self.email = email
