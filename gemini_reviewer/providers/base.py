class VCSProvider:
    async def create_review(self, repository, pull_number, commit_id, body):
        raise NotImplementedError
