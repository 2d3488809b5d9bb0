SUBJECTS = [
    {
        "name": "Arrays",
        "description": "Work with ordered data and efficient iteration.",
        "questions": [
            {
                "prompt": "Given an array of integers, return the first index where the running sum is greater than 20.",
                "hint": "Track a cumulative sum and return once it exceeds 20.",
            },
            {
                "prompt": "Find the longest strictly increasing contiguous segment in an array.",
                "hint": "Keep a length counter that resets when the sequence breaks.",
            },
            {
                "prompt": "Rotate an array to the right by k steps without using extra arrays.",
                "hint": "Try reversing segments: whole array, then two subarrays.",
            },
        ],
    },
    {
        "name": "Strings",
        "description": "Manipulate sequences of characters with precision.",
        "questions": [
            {
                "prompt": "Determine if two strings are one edit away (insert, delete, or replace).",
                "hint": "Walk both strings with two pointers and allow only one mismatch.",
            },
            {
                "prompt": "Return the length of the longest substring without repeating characters.",
                "hint": "Use a sliding window and track last seen positions.",
            },
            {
                "prompt": "Compress a string by replacing repeats with counts (aabccc -> a2b1c3).",
                "hint": "Count streaks and reset when the character changes.",
            },
        ],
    },
    {
        "name": "Logic",
        "description": "Strengthen reasoning and flow control.",
        "questions": [
            {
                "prompt": "Given n, output 'Fizz', 'Buzz', or 'FizzBuzz' based on divisibility by 3 and 5.",
                "hint": "Check divisibility by 15 first, then 3, then 5.",
            },
            {
                "prompt": "Determine whether a sequence of parentheses is balanced.",
                "hint": "Keep a counter; it should never drop below zero and end at zero.",
            },
            {
                "prompt": "Given a grid of 0s and 1s, count the number of islands of 1s.",
                "hint": "DFS/BFS each unvisited 1 and mark it visited.",
            },
        ],
    },
    {
        "name": "Object Oriented Programming",
        "description": "Model systems with classes, objects, and clean interfaces.",
        "questions": [
            {
                "prompt": "Design a class for a library book with checkout, return, and status methods.",
                "hint": "Track availability and who has the book.",
            },
            {
                "prompt": "Create a class hierarchy for vehicles with polymorphic start() methods.",
                "hint": "Use a base class and override behavior in subclasses.",
            },
            {
                "prompt": "Build a simple BankAccount class with deposit, withdraw, and balance checks.",
                "hint": "Validate that withdrawals do not drop below zero.",
            },
        ],
    },
]
