from models.article import Post

MAX_COMMENTS = 5
MAX_REPLIES = 2


def format_post_data(post: Post) -> str:
    """
    Render a post and a bounded slice of its comment tree as prompt text.
    """
    formatted = f"# {post.title or ''}\n\n**Posted by {post.author or ''}**\n\n{post.text}\n\n"

    if post.comments:
        formatted += "## Top Comments\n\n"
        for comment in post.comments[:MAX_COMMENTS]:
            label = "user" if comment.text else "unknown"
            formatted += f"**Comment by {label}**:\n{comment.text}\n\n"
            for reply in comment.replies[:MAX_REPLIES]:
                formatted += f"> Reply: {reply.text}\n\n"

    return formatted
