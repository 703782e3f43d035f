"""Static questionnaire content, one ten-question set per topic."""
from typing import Dict, List

from .models import AnswerType, Question, Topic, TopicId


TOPICS: List[Topic] = [
    Topic(id=TopicId.ANXIETY_DISORDERS, name="Anxiety Disorders", description="Persistent worry, fear, and anxiety symptoms"),
    Topic(id=TopicId.DEPRESSION, name="Depression & Low Mood", description="Sadness, hopelessness, and depressive symptoms"),
    Topic(id=TopicId.STRESS, name="Stress & Burnout", description="Overwhelm, exhaustion, and chronic stress"),
    Topic(id=TopicId.INSOMNIA, name="Insomnia & Sleep Problems", description="Sleep difficulties and sleep disorders"),
    Topic(id=TopicId.TRAUMA, name="Trauma & PTSD", description="Trauma responses and post-traumatic stress"),
    Topic(id=TopicId.SELF_ESTEEM, name="Low Self-Esteem & Self-Doubt", description="Poor self-image and confidence issues"),
    Topic(id=TopicId.EMOTIONAL_DYSREGULATION, name="Emotional Dysregulation", description="Difficulty managing and controlling emotions"),
    Topic(id=TopicId.NEGATIVE_THOUGHTS, name="Negative Thought Patterns & Overthinking", description="Rumination and persistent negative thinking"),
    Topic(id=TopicId.SOCIAL_ANXIETY, name="Social Anxiety", description="Fear and anxiety in social situations"),
    Topic(id=TopicId.ADJUSTMENT, name="Adjustment & Identity Issues", description="Life transitions and identity concerns"),
]


def _freeform(qid: str, text: str, category: str) -> Question:
    return Question(id=qid, text=text, type=AnswerType.FREEFORM, category=category)


def _yes_no(qid: str, text: str) -> Question:
    return Question(id=qid, text=text, type=AnswerType.BINARY, options=("Yes", "No"), category="closed")


def _rating(qid: str, text: str, low: int, high: int) -> Question:
    return Question(id=qid, text=text, type=AnswerType.RATING, min_value=low, max_value=high, category="scaling")


QUESTIONNAIRES: Dict[TopicId, List[Question]] = {
    TopicId.ANXIETY_DISORDERS: [
        _freeform("1", "Can you describe a recent situation where you felt anxious? What was happening around you and what thoughts went through your mind?", "open-ended"),
        _freeform("2", "How does anxiety feel in your body? Describe the physical sensations you experience when you're anxious.", "open-ended"),
        _yes_no("3", "Do you experience panic attacks (sudden intense fear with physical symptoms)?"),
        _yes_no("4", "Have you been diagnosed with an anxiety disorder by a healthcare professional?"),
        _rating("5", "On a scale of 1-10, how would you rate your average anxiety level over the past week?", 1, 10),
        _rating("6", "How much does anxiety interfere with your daily life? (1 = not at all, 10 = completely disrupts my life)", 1, 10),
        _freeform("7", "What do you typically do when you start feeling anxious? Describe your usual coping strategies.", "behavioral"),
        _freeform("8", "Do you avoid certain places, people, or situations because of anxiety? If so, which ones?", "behavioral"),
        _freeform("9", "When you think about your anxiety, what do you believe might be the underlying causes or triggers?", "reflective"),
        _freeform("10", "What would your life look like if you could better manage your anxiety? What specific changes would you hope to see?", "future-oriented"),
    ],

    TopicId.DEPRESSION: [
        _freeform("1", "Can you describe what a typical day feels like for you when you're experiencing depression? Walk me through your thoughts and feelings.", "open-ended"),
        _freeform("2", "Tell me about activities or hobbies you used to enjoy. How do you feel about them now?", "open-ended"),
        _yes_no("3", "Have you experienced significant changes in your sleep patterns (sleeping too much or too little)?"),
        _yes_no("4", "Have you had thoughts of death or suicide?"),
        _rating("5", "On a scale of 1-10, how would you rate your overall mood over the past two weeks?", 1, 10),
        _rating("6", "How would you rate your energy levels on a typical day? (1 = no energy at all, 10 = full of energy)", 1, 10),
        _freeform("7", "How do you typically spend your days? Describe your daily routine and activities.", "behavioral"),
        _freeform("8", "When you feel overwhelmed by sadness, what do you usually do? What helps or doesn't help?", "behavioral"),
        _freeform("9", "Looking back, when did you first notice these feelings of depression? What do you think might have contributed to them?", "reflective"),
        _freeform("10", "What would feeling better look like to you? What specific goals would you like to work toward in your recovery?", "future-oriented"),
    ],

    TopicId.STRESS: [
        _freeform("1", "Describe your most stressful day recently. What happened and how did you feel throughout the day?", "open-ended"),
        _freeform("2", "Tell me about the main sources of stress in your life right now. What situations or responsibilities feel overwhelming?", "open-ended"),
        _yes_no("3", "Do you experience physical symptoms when stressed (headaches, muscle tension, stomach issues)?"),
        _yes_no("4", "Do you currently have a regular relaxation or stress-relief routine?"),
        _rating("5", "On a scale of 1-10, how would you rate your current stress level?", 1, 10),
        _rating("6", "How well do you feel you currently manage stress? (1 = very poorly, 10 = very well)", 1, 10),
        _freeform("7", "What do you typically do when you feel overwhelmed by stress? Describe your usual responses or coping strategies.", "behavioral"),
        _freeform("8", "How does stress affect your daily habits (eating, sleeping, exercise, work performance)?", "behavioral"),
        _freeform("9", "When you reflect on your stress patterns, what do you notice about when and why you feel most stressed?", "reflective"),
        _freeform("10", "What would your ideal stress management look like? What specific skills or changes would help you feel more in control?", "future-oriented"),
    ],

    TopicId.INSOMNIA: [
        _freeform("1", "Describe a typical night for you. What happens from when you get into bed until you fall asleep?", "open-ended"),
        _freeform("2", "Tell me about how poor sleep affects your daily life. What do you notice about your mood, energy, and functioning?", "open-ended"),
        _yes_no("3", "Do you wake up frequently during the night (more than twice)?"),
        _yes_no("4", "Do you currently use any sleep medications or aids?"),
        _rating("5", "How many hours of sleep do you typically get per night?", 1, 12),
        _rating("6", "On a scale of 1-10, how would you rate your sleep quality when you do sleep?", 1, 10),
        _freeform("7", "What do you typically do in the hour before bedtime? Describe your evening routine.", "behavioral"),
        _freeform("8", "When you can't fall asleep, what do you usually do? How do you try to cope with sleeplessness?", "behavioral"),
        _freeform("9", "What do you think are the main factors contributing to your sleep difficulties? What patterns have you noticed?", "reflective"),
        _freeform("10", "What would good sleep look like for you? What specific improvements in your sleep would make the biggest difference in your life?", "future-oriented"),
    ],

    TopicId.TRAUMA: [
        _freeform("1", "If you feel comfortable sharing, can you tell me about the traumatic experience(s) that brought you here? Take your time and share only what feels safe.", "open-ended"),
        _freeform("2", "Describe how trauma has affected your daily life. What changes have you noticed in yourself since the traumatic event(s)?", "open-ended"),
        _yes_no("3", "Do you experience flashbacks, nightmares, or intrusive memories related to the trauma?"),
        _yes_no("4", "Do you avoid certain places, people, or situations that remind you of the trauma?"),
        _rating("5", "On a scale of 1-10, how safe do you feel in your daily life right now?", 1, 10),
        _rating("6", "How much do trauma symptoms interfere with your daily functioning? (1 = not at all, 10 = completely)", 1, 10),
        _freeform("7", "How do you typically respond when you're triggered or reminded of the trauma? What do you do to cope?", "behavioral"),
        _freeform("8", "How have your relationships and social connections changed since the traumatic event? How do you interact with others now?", "behavioral"),
        _freeform("9", "What have you learned about yourself and your resilience through this experience? What strengths have you discovered?", "reflective"),
        _freeform("10", "What would healing look like for you? What specific goals do you have for your recovery and moving forward?", "future-oriented"),
    ],

    TopicId.SELF_ESTEEM: [
        _freeform("1", "How do you typically talk to yourself in your mind? What kinds of thoughts do you have about yourself throughout the day?", "open-ended"),
        _freeform("2", "Describe a recent situation where you felt particularly bad about yourself. What happened and what went through your mind?", "open-ended"),
        _yes_no("3", "Do you often compare yourself to others (on social media, at work, in social situations)?"),
        _yes_no("4", "Do you have difficulty accepting compliments or positive feedback from others?"),
        _rating("5", "On a scale of 1-10, how would you rate your overall self-confidence?", 1, 10),
        _rating("6", "How much do you like yourself as a person? (1 = not at all, 10 = completely)", 1, 10),
        _freeform("7", "How do you typically react to criticism or feedback? What do you do when someone points out a mistake?", "behavioral"),
        _freeform("8", "What do you do when you accomplish something or receive praise? How do you handle your successes?", "behavioral"),
        _freeform("9", "When you think about your self-worth, what messages or beliefs about yourself do you think you learned growing up?", "reflective"),
        _freeform("10", "What would having healthy self-esteem look like for you? How would you like to feel about yourself and treat yourself?", "future-oriented"),
    ],

    TopicId.EMOTIONAL_DYSREGULATION: [
        _freeform("1", "Describe what it feels like when your emotions become overwhelming. Walk me through a recent intense emotional experience.", "open-ended"),
        _freeform("2", "Tell me about how your emotions affect your relationships. What do others notice about your emotional responses?", "open-ended"),
        _yes_no("3", "Do your emotions often feel much stronger than the situation seems to warrant?"),
        _yes_no("4", "Do you have difficulty calming down once you become emotionally upset?"),
        _rating("5", "On a scale of 1-10, how intense are your emotions when they occur?", 1, 10),
        _rating("6", "How quickly do your emotions change throughout a typical day? (1 = very stable, 10 = constantly changing)", 1, 10),
        _freeform("7", "What do you typically do when you feel emotionally overwhelmed? Describe your usual responses or actions.", "behavioral"),
        _freeform("8", "How do you express your emotions? Do you tend to keep them inside, express them outwardly, or something else?", "behavioral"),
        _freeform("9", "What patterns do you notice in your emotional responses? Are there specific triggers or situations that consistently affect you?", "reflective"),
        _freeform("10", "What would emotional balance look like for you? How would you like to experience and manage your emotions differently?", "future-oriented"),
    ],

    TopicId.NEGATIVE_THOUGHTS: [
        _freeform("1", "Describe what goes through your mind during a typical overthinking episode. What kinds of thoughts loop in your head?", "open-ended"),
        _freeform("2", "Tell me about a recent situation where negative thinking took over. What happened and how did your thoughts spiral?", "open-ended"),
        _yes_no("3", "Do you often replay conversations or events in your mind repeatedly?"),
        _yes_no("4", "Do you frequently imagine worst-case scenarios or catastrophic outcomes?"),
        _rating("5", "On a scale of 1-10, how much time do you spend overthinking or ruminating each day?", 1, 10),
        _rating("6", "How much do negative thought patterns interfere with your daily life? (1 = not at all, 10 = completely)", 1, 10),
        _freeform("7", "What do you typically do when you notice yourself stuck in negative thinking? How do you try to break the cycle?", "behavioral"),
        _freeform("8", "How do these thought patterns affect your behavior and decision-making? What do you do differently when caught in negative thinking?", "behavioral"),
        _freeform("9", "When you step back and observe your thinking patterns, what do you notice? What themes or triggers do you recognize?", "reflective"),
        _freeform("10", "What would it be like to have more balanced, helpful thinking patterns? How would your life be different?", "future-oriented"),
    ],

    TopicId.SOCIAL_ANXIETY: [
        _freeform("1", "Describe your experience in social situations. What goes through your mind before, during, and after social interactions?", "open-ended"),
        _freeform("2", "Tell me about a recent social situation that felt particularly challenging. What made it difficult and how did you handle it?", "open-ended"),
        _yes_no("3", "Do you avoid social events, gatherings, or situations because of anxiety?"),
        _yes_no("4", "Do you experience physical symptoms (sweating, blushing, trembling) in social situations?"),
        _rating("5", "On a scale of 1-10, how anxious do you typically feel in social situations?", 1, 10),
        _rating("6", "How much do you worry about being judged or embarrassed by others? (1 = never, 10 = constantly)", 1, 10),
        _freeform("7", "What do you typically do to prepare for or cope with social situations? Describe your strategies or safety behaviors.", "behavioral"),
        _freeform("8", "How has social anxiety affected your relationships, work, or school? What opportunities have you missed or avoided?", "behavioral"),
        _freeform("9", "What do you think others actually think about you versus what you fear they think? What evidence do you have for your social fears?", "reflective"),
        _freeform("10", "What would social confidence look like for you? What specific social goals would you like to work toward?", "future-oriented"),
    ],

    TopicId.ADJUSTMENT: [
        _freeform("1", "Describe the major life changes or transitions you're currently experiencing. What has shifted in your life recently?", "open-ended"),
        _freeform("2", "Tell me about how these changes have affected your sense of who you are. What feels different about yourself or your identity?", "open-ended"),
        _yes_no("3", "Are you currently going through a major life transition (career change, relationship change, moving, etc.)?"),
        _yes_no("4", "Do you feel uncertain about your life direction or future path?"),
        _rating("5", "On a scale of 1-10, how confident do you feel about who you are as a person right now?", 1, 10),
        _rating("6", "How well are you coping with the changes in your life? (1 = very poorly, 10 = very well)", 1, 10),
        _freeform("7", "How do you typically handle major changes or transitions? What strategies do you use to adapt?", "behavioral"),
        _freeform("8", "What support systems or resources do you turn to during times of change? How do you seek help or guidance?", "behavioral"),
        _freeform("9", "What core values and beliefs remain important to you despite the changes you're experiencing? What stays constant about who you are?", "reflective"),
        _freeform("10", "How do you envision yourself adapting and growing through this transition? What kind of person do you hope to become?", "future-oriented"),
    ],
}
