def make_aws_users(n=3, prefix="", domain="test.com", store_id="d-123412341234"):
    users = []
    for i in range(n):
        user = {
            "UserName": f"{prefix}user-email{i+1}@{domain}",
            "UserId": f"{prefix}user_id{i+1}",
            "Name": {
                "FamilyName": f"Family_name_{i+1}",
                "GivenName": f"Given_name_{i+1}",
            },
            "DisplayName": f"Given_name_{i+1} Family_name_{i+1}",
            "Emails": [
                {
                    "Value": f"{prefix}user-email{i+1}@{domain}",
                    "Type": "work",
                    "Primary": True,
                }
            ],
            "IdentityStoreId": f"{store_id}",
        }
        users.append(user)
    return users


def make_aws_groups(n=3, prefix="", names=None, store_id="d-123412341234"):
    names = names or [f"{prefix}group-name{i+1}" for i in range(n)]
    return [
        {
            "GroupId": f"{prefix}aws-group_id{i+1}",
            "DisplayName": name,
            "Description": f"A group to test resolving AWS-group{i+1} memberships",
            "IdentityStoreId": f"{store_id}",
        }
        for i, name in enumerate(names)
    ]


def make_aws_groups_memberships(n=3, prefix="", group_id=1, store_id="d-123412341234"):
    return {
        "GroupMemberships": [
            {
                "IdentityStoreId": f"{store_id}",
                "MembershipId": f"{prefix}membership_id_{i+1}",
                "GroupId": f"{prefix}aws-group_id{group_id}",
                "MemberId": {
                    "UserId": f"{prefix}user_id{i+1}",
                },
            }
            for i in range(n)
        ]
    }


def make_pages(items, key, page_size):
    """Split items into list responses chained by NextToken.

    The last page carries no NextToken.
    """
    pages = []
    chunks = [items[i : i + page_size] for i in range(0, len(items), page_size)]
    for number, chunk in enumerate(chunks or [[]]):
        page = {key: list(chunk)}
        if number < len(chunks) - 1:
            page["NextToken"] = f"token-{number + 1}"
        pages.append(page)
    return pages


def paged_responder(pages):
    """Return a callable answering list calls from pages by NextToken."""
    by_token = {None: pages[0]}
    for number, page in enumerate(pages[1:], start=1):
        by_token[f"token-{number}"] = page

    def _respond(**kwargs):
        return by_token[kwargs.get("NextToken")]

    return _respond
