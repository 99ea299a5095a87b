from string import Template

#### REVIEW SUMMARY PROMPTS ####

system_prompt = Template("\n".join([
    "You are an AI assistant specializing in summarizing user reviews for manga titles.",
    "You read every review and identify the points that readers bring up most often.",
    "Keep each point short, a few words at most, and do not invent points that no review makes.",
    "If the reviews do not agree on anything, return an empty list.",
]))

review_prompt = Template("- $review")

footer_prompt = Template("\n".join([
    'Given the following reviews for the manga "$manga_title", identify the most common pros and cons discussed by users.',
    "Present the pros and cons as succinct bullet point lists.",
    "",
    "Reviews:",
    "$reviews",
    "",
    "Summarize the reviews into two lists:",
    '- A list of pros called "pros"',
    '- A list of cons called "cons"',
]))
