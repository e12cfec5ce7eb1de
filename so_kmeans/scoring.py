"""scoring.py

Pairs questions with their answers and scores each question by its best answer
"""

from .postings import ANSWER, QUESTION


def groupedPostings(postings):
    """Groups the questions and answers together

    Questions are keyed by their id and answers by their parentId, so the inner
    join drops answers without a question and questions without answers.

    :param postings: A Dataset of Posting
    :return: A Dataset of (question id, [(question, answer), ...])
    """

    questions = postings \
        .filter(lambda posting : posting.postingType == QUESTION) \
        .map(lambda posting : (posting.id, posting))
    answers = postings \
        .filter(lambda posting : posting.postingType == ANSWER) \
        .map(lambda posting : (posting.parentId, posting))

    return questions \
        .join(answers) \
        .groupByKey()


def answerHighScore(answers : list) -> int:
    """Computes the highest score among a question's answers"""

    return max(answer.score for answer in answers)


def scoredPostings(grouped):
    """Computes the best answer score of every answered question

    :param grouped: A Dataset of (question id, [(question, answer), ...])
    :return: A Dataset of (question, high score)
    """

    return grouped.map(lambda qaPairs : (
        qaPairs[1][0][0],
        answerHighScore([answer for _, answer in qaPairs[1]])))
