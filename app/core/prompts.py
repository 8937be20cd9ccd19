from typing import Union


def generate_interview_questions_prompt(
    role: str,
    level: str,
    techstack: str,
    focus: str,
    amount: Union[int, str],
) -> str:
    """
    Generate the prompt for interview question generation.

    Args:
        role: The job role, e.g. "Frontend Developer".
        level: The experience level, e.g. "Junior".
        techstack: Comma separated tech stack as sent by the client.
        focus: Whether the interview leans behavioural or technical.
        amount: The number of questions required.

    Returns:
        The formatted prompt string.
    """
    return (
        "Prepare questions for a job interview.\n"
        f"The job role is {role}.\n"
        f"The job experience level is {level}.\n"
        f"The tech stack used in the job is: {techstack}.\n"
        f"The focus between behavioural and technical questions should lean towards: {focus}.\n"
        f"The amount of questions required is: {amount}.\n"
        "Please return only the questions, without any additional text.\n"
        "The questions are going to be read by a voice assistant so do not use \"/\" or \"*\" "
        "or any other special characters which might break the voice assistant.\n"
        "Return the questions formatted like this:\n"
        "[\"Question 1\", \"Question 2\", \"Question 3\"]\n\n"
        "Thank you! <3"
    )
