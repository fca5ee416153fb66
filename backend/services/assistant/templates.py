"""Response templates, one per decision shape (plus GENERAL)."""

from types import MappingProxyType

_SECTION_SCORES = """{{#section_breakdown}}
**Section Scores:**
{{#skills}}- Skills: {{skills}}%{{/skills}}
{{#experience}}- Experience: {{experience}}%{{/experience}}
{{#education}}- Education: {{education}}%{{/education}}
{{#format}}- Format: {{format}}%{{/format}}
{{/section_breakdown}}
"""

SCORE_EXPLANATION = MappingProxyType({
    "EXCELLENT": """## Great News! 🎉

Your ATS score is **{{overall_score}}%** - this is an excellent match!

""" + _SECTION_SCORES + """
{{#highest_section}}
**Strongest Area:** {{highest_section.name}} ({{highest_section.score}}%)
{{/highest_section}}

**Recommendation:** Your resume is well-optimized. Consider applying soon!""",

    "GOOD": """## Good Match ✓

Your ATS score is **{{overall_score}}%** - you're a solid candidate.

""" + _SECTION_SCORES + """
{{#lowest_section}}
**Area to Improve:** {{lowest_section.name}} ({{lowest_section.score}}%)
{{/lowest_section}}

{{#primary_issue}}
**Recommendation:** {{primary_issue.recommendation}}
{{/primary_issue}}""",

    "MODERATE": """## Room for Improvement

Your ATS score is **{{overall_score}}%** - there's potential to improve.

""" + _SECTION_SCORES + """
{{#lowest_section}}
**Main Issue:** {{lowest_section.name}} section needs work ({{lowest_section.score}}%)
{{/lowest_section}}

**Action Items:**
{{#action_items}}
• {{.}}
{{/action_items}}""",

    "LOW": """## Significant Improvements Needed

Your ATS score is **{{overall_score}}%** - this needs attention before applying.

""" + _SECTION_SCORES + """
{{#lowest_section}}
**Primary Focus:** {{lowest_section.name}} ({{lowest_section.score}}%)
{{/lowest_section}}

**Urgent Action Items:**
{{#action_items}}
• {{.}}
{{/action_items}}

**Tip:** Focus on adding missing core skills from the job description.""",
})

SKILLS_GAP = MappingProxyType({
    "HIGH": """## Skills Gap Analysis ⚠️

You're missing **{{missing_core_count}}** core skills from the job description.

**Must Add (High Priority):**
{{#primary_focus}}
• **{{.}}** - This is a core requirement
{{/primary_focus}}

{{#has_secondary}}
**Nice to Have:**
{{#secondary_focus}}
• {{.}}
{{/secondary_focus}}
{{/has_secondary}}

**Potential Impact:** Adding these skills could improve your score by ~**{{potential_score_gain}}%**""",

    "MEDIUM": """## Skills Gap Analysis

You're missing **{{missing_core_count}}** core skills.

**Top Skills to Add:**
{{#primary_focus}}
• **{{.}}**
{{/primary_focus}}

{{#has_secondary}}
**Optional (Stand Out):**
{{#secondary_focus}}
• {{.}}
{{/secondary_focus}}
{{/has_secondary}}

**Estimated Impact:** +**{{potential_score_gain}}%** score improvement""",

    "LOW": """## Skills Analysis ✓

Great news! You have most core skills covered.

{{#has_secondary}}
**Consider Adding (Nice to Have):**
{{#secondary_focus}}
• {{.}}
{{/secondary_focus}}
{{/has_secondary}}

**Already Covered:** {{matched_count}} of {{total_skills}} required skills""",
})

JD_MATCH = MappingProxyType({
    "STRONG_FIT": """## Strong Match! 🎯

**Match Rate:** {{match_percentage}}% ({{matched_count}}/{{total_required}} skills)

**Your Matching Skills:**
{{#top_matches}}
• ✓ {{.}}
{{/top_matches}}

**Verdict:** You're a strong candidate for this role. Consider applying!""",

    "GOOD_FIT": """## Good Match ✓

**Match Rate:** {{match_percentage}}% ({{matched_count}}/{{total_required}} skills)

**Matching Skills:**
{{#top_matches}}
• ✓ {{.}}
{{/top_matches}}

**Skills to Add:**
{{#top_gaps}}
• {{.}}
{{/top_gaps}}

**Verdict:** Good fit - adding missing skills would make you a top candidate.""",

    "PARTIAL_FIT": """## Partial Match

**Match Rate:** {{match_percentage}}% ({{matched_count}}/{{total_required}} skills)

**Currently Matching:**
{{#top_matches}}
• ✓ {{.}}
{{/top_matches}}

**Key Gaps:**
{{#top_gaps}}
• ✗ {{.}}
{{/top_gaps}}

**Recommendation:** Focus on acquiring the missing core skills before applying.""",

    "WEAK_FIT": """## Limited Match ⚠️

**Match Rate:** {{match_percentage}}% ({{matched_count}}/{{total_required}} skills)

**Critical Gaps:**
{{#top_gaps}}
• ✗ {{.}}
{{/top_gaps}}

**Recommendation:** This role may require significant skill development. Consider roles that better match your current skillset, or focus on upskilling.""",
})

EXPERIENCE_IMPROVE = """## Experience Section Feedback

{{#has_weak_verbs}}
**Weak Action Verbs Found:**
{{#weak_verbs}}
• "{{.}}" → Replace with stronger verbs
{{/weak_verbs}}

**Recommended Action Verbs:**
{{#action_verbs}}
• {{.}}
{{/action_verbs}}
{{/has_weak_verbs}}

**Key Improvements:**
{{#primary_issues}}
• {{fix}}
{{/primary_issues}}

**Tips:**
• Start each bullet with a strong action verb
• Quantify achievements (numbers, percentages, metrics)
• Focus on impact and results, not just duties"""

KEYWORD_SUGGESTION = """## Keyword Suggestions 🔑

**Must Add (High Priority):**
{{#must_add}}
• **{{.}}**
{{/must_add}}

{{#has_nice_to_have}}
**Nice to Have:**
{{#nice_to_have}}
• {{.}}
{{/nice_to_have}}
{{/has_nice_to_have}}

**Already Included:** {{already_count}} keywords

**Impact:** {{estimated_impact}} improvement expected"""

FORMATTING_FEEDBACK = """## Formatting Feedback

{{#has_score}}**Format Score:** {{format_score}}%{{/has_score}}

{{#has_issues}}
**Issues Found:**
{{#issues}}
• {{description}}
{{/issues}}
{{/has_issues}}

**Recommendations:**
{{#recommendations}}
• {{.}}
{{/recommendations}}

**General Tips:**
{{#general_tips}}
• {{.}}
{{/general_tips}}"""

RESUME_REWRITE = """## Rewrite Assistance

I can help improve your resume text. Please provide the specific bullet point or section you'd like me to rewrite.

{{#has_weak_verbs}}
**Weak verbs I noticed:** {{weak_verbs}}
{{/has_weak_verbs}}

**Guidelines I'll follow:**
{{#guidelines}}
• {{.}}
{{/guidelines}}"""

GENERAL = """## Resume Overview

Your ATS score is **{{overall_score}}%**, with {{matched_skills_count}} core skills matched and {{missing_skills_count}} missing.

{{#has_recommendations}}
Recommendations are available for your resume. Ask "What skills am I missing?" or "How can I improve my experience section?" to see them.
{{/has_recommendations}}

{{message}}"""

DOMAIN_REFUSAL = (
    "I can only assist with resume analysis and ATS optimization.\n\n"
    "**Try asking:**\n"
    "• \"Why is my score low?\"\n"
    "• \"What skills am I missing?\"\n"
    "• \"How can I improve my experience section?\"\n"
    "• \"How well do I match this job?\""
)
