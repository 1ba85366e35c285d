PROMPT = """You are an expert career coach. A user has provided their resume and a job description. The analysis found these missing keywords: {0}. Based on the resume text and the job description, suggest three specific, actionable improvements to the resume's bullet points to better align with the job description. Do not just list the keywords. Provide concrete, rephrased bullet points.
---
RESUME TEXT:
{1}
---
JOB DESCRIPTION:
{2}"""
