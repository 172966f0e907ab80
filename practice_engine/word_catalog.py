"""Vocabulary catalog, partitioned by tier."""

from __future__ import annotations

from .models import Tier, WordEntry


def _entry(word: str, definition: str, hints: tuple[str, ...], category: str) -> WordEntry:
    return WordEntry(word=word, definition=definition, hints=hints, category=category)


WORD_CATALOG: dict[Tier, tuple[WordEntry, ...]] = {
    Tier.EASY: (
        _entry(
            "cat",
            "A small furry pet that meows",
            ("It has whiskers", "It purrs when happy", "It catches mice"),
            "Animals",
        ),
        _entry(
            "dog",
            "A loyal pet that barks and wags its tail",
            ("Man's best friend", "It barks", "It wags its tail"),
            "Animals",
        ),
        _entry(
            "sun",
            "The bright star that gives us light and warmth",
            ("It shines in the sky", "It's very hot", "It gives us light"),
            "Nature",
        ),
        _entry(
            "book",
            "Something you read with pages and words",
            ("You read it", "It has pages", "Libraries have many"),
            "Objects",
        ),
        _entry(
            "tree",
            "A tall plant with branches and leaves",
            ("It has leaves", "Birds nest in it", "It grows tall"),
            "Nature",
        ),
        _entry(
            "house",
            "A building where people live",
            ("People live in it", "It has rooms", "It has a roof"),
            "Places",
        ),
        _entry(
            "water",
            "A clear liquid that we drink",
            ("We drink it", "Fish swim in it", "It's wet"),
            "Nature",
        ),
        _entry(
            "happy",
            "Feeling joyful and pleased",
            ("A good feeling", "Opposite of sad", "Makes you smile"),
            "Emotions",
        ),
        _entry(
            "bird",
            "An animal that flies and has feathers",
            ("It has wings", "It can fly", "It lays eggs"),
            "Animals",
        ),
        _entry(
            "fish",
            "An animal that lives in water",
            ("Lives in water", "Has fins", "Can swim"),
            "Animals",
        ),
        _entry(
            "moon",
            "The bright object in the night sky",
            ("Shines at night", "Changes shape", "In the sky"),
            "Nature",
        ),
        _entry(
            "car",
            "A vehicle with four wheels",
            ("Has four wheels", "You drive it", "Uses gas"),
            "Transportation",
        ),
        _entry(
            "ball",
            "A round object used in games",
            ("It's round", "Used in sports", "You can throw it"),
            "Toys",
        ),
        _entry(
            "cake",
            "A sweet dessert for celebrations",
            ("Sweet dessert", "Has candles on birthdays", "Made with flour"),
            "Food",
        ),
        _entry(
            "shoe",
            "Something you wear on your feet",
            ("Worn on feet", "Protects your feet", "Has laces"),
            "Clothing",
        ),
        _entry(
            "hat",
            "Something you wear on your head",
            ("Worn on head", "Protects from sun", "Can have a brim"),
            "Clothing",
        ),
        _entry(
            "pen",
            "A tool used for writing",
            ("Used for writing", "Has ink", "Held in hand"),
            "Tools",
        ),
        _entry(
            "cup",
            "A container for drinking",
            ("Used for drinking", "Has a handle", "Holds liquids"),
            "Objects",
        ),
        _entry(
            "bed",
            "Furniture where you sleep",
            ("You sleep on it", "Has a mattress", "In the bedroom"),
            "Furniture",
        ),
        _entry(
            "toy",
            "Something children play with",
            ("Children play with it", "For fun", "Can be colorful"),
            "Toys",
        ),
    ),
    Tier.MEDIUM: (
        _entry(
            "elephant",
            "A large gray animal with a long trunk",
            ("It has a trunk", "It's very big", "It has big ears"),
            "Animals",
        ),
        _entry(
            "butterfly",
            "A colorful insect with beautiful wings",
            ("It has colorful wings", "It flies from flower to flower", "It was once a caterpillar"),
            "Animals",
        ),
        _entry(
            "rainbow",
            "Colorful arc in the sky after rain",
            ("Appears after rain", "Has many colors", "Arcs across the sky"),
            "Nature",
        ),
        _entry(
            "bicycle",
            "A vehicle with two wheels that you pedal",
            ("Has two wheels", "You pedal it", "Good for exercise"),
            "Transportation",
        ),
        _entry(
            "computer",
            "An electronic device for processing information",
            ("Has a screen", "You type on it", "Runs programs"),
            "Technology",
        ),
        _entry(
            "birthday",
            "The day you were born, celebrated yearly",
            ("Celebrated once a year", "You blow out candles", "You get presents"),
            "Events",
        ),
        _entry(
            "sandwich",
            "Food made with bread and fillings",
            ("Made with bread", "Has fillings inside", "Good for lunch"),
            "Food",
        ),
        _entry(
            "adventure",
            "An exciting and unusual experience",
            ("Exciting experience", "Often involves travel", "Can be dangerous"),
            "Concepts",
        ),
        _entry(
            "mountain",
            "A very tall hill or peak",
            ("Very tall", "Has a peak", "Snow on top"),
            "Geography",
        ),
        _entry(
            "ocean",
            "A large body of salt water",
            ("Very large water", "Has waves", "Fish live in it"),
            "Geography",
        ),
        _entry(
            "library",
            "A place where books are kept",
            ("Has many books", "You can borrow books", "Quiet place"),
            "Places",
        ),
        _entry(
            "garden",
            "A place where plants and flowers grow",
            ("Plants grow here", "Has flowers", "You water it"),
            "Places",
        ),
        _entry(
            "kitchen",
            "A room where food is prepared",
            ("Where you cook", "Has a stove", "Food is made here"),
            "Rooms",
        ),
        _entry(
            "picture",
            "An image or drawing",
            ("Shows an image", "Can be drawn", "Hangs on wall"),
            "Art",
        ),
        _entry(
            "music",
            "Sounds arranged in a pleasing way",
            ("You listen to it", "Has rhythm", "Can be sung"),
            "Art",
        ),
        _entry(
            "friend",
            "Someone you like and enjoy being with",
            ("Someone you like", "You play together", "Cares about you"),
            "People",
        ),
        _entry(
            "teacher",
            "A person who helps you learn",
            ("Helps you learn", "Works at school", "Gives lessons"),
            "People",
        ),
        _entry(
            "doctor",
            "A person who helps sick people",
            ("Helps sick people", "Works in hospital", "Uses medicine"),
            "People",
        ),
        _entry(
            "airplane",
            "A flying vehicle with wings",
            ("It flies", "Has wings", "Carries passengers"),
            "Transportation",
        ),
        _entry(
            "telephone",
            "A device used to talk to people far away",
            ("Used to talk", "Has numbers", "Makes calls"),
            "Technology",
        ),
    ),
    Tier.INTERMEDIATE: (
        _entry(
            "magnificent",
            "Extremely beautiful or impressive",
            ("Means very beautiful", "Impressive to see", "Grand and splendid"),
            "Adjectives",
        ),
        _entry(
            "mysterious",
            "Difficult to understand or explain",
            ("Hard to understand", "Full of secrets", "Puzzling"),
            "Adjectives",
        ),
        _entry(
            "telescope",
            "An instrument for viewing distant objects",
            ("Used to see far away", "Astronomers use it", "Makes things look bigger"),
            "Science",
        ),
        _entry(
            "democracy",
            "A system where people vote for their leaders",
            ("People vote", "Government system", "Power to the people"),
            "Politics",
        ),
        _entry(
            "photosynthesis",
            "How plants make food using sunlight",
            ("Plants do this", "Uses sunlight", "Makes oxygen"),
            "Science",
        ),
        _entry(
            "archaeology",
            "The study of ancient civilizations",
            ("Studies old things", "Digs up artifacts", "About ancient people"),
            "Science",
        ),
        _entry(
            "encyclopedia",
            "A book with information on many subjects",
            ("Has lots of information", "Organized alphabetically", "Reference book"),
            "Education",
        ),
        _entry(
            "refrigerator",
            "An appliance that keeps food cold",
            ("Keeps food cold", "In the kitchen", "Prevents spoiling"),
            "Appliances",
        ),
        _entry(
            "geography",
            "The study of Earth and its features",
            ("Studies Earth", "About maps", "Countries and continents"),
            "Science",
        ),
        _entry(
            "mathematics",
            "The study of numbers and calculations",
            ("About numbers", "Addition and subtraction", "Solving problems"),
            "Education",
        ),
        _entry(
            "temperature",
            "How hot or cold something is",
            ("Hot or cold", "Measured in degrees", "Weather has this"),
            "Science",
        ),
        _entry(
            "celebration",
            "A special event or party",
            ("Special event", "People gather", "Happy occasion"),
            "Events",
        ),
        _entry(
            "imagination",
            "The ability to create ideas in your mind",
            ("Creating ideas", "In your mind", "Being creative"),
            "Mind",
        ),
        _entry(
            "responsibility",
            "A duty or task you must do",
            ("Something you must do", "A duty", "Being reliable"),
            "Character",
        ),
        _entry(
            "environment",
            "The natural world around us",
            ("Natural world", "Plants and animals", "We must protect it"),
            "Nature",
        ),
        _entry(
            "communication",
            "Sharing information with others",
            ("Sharing information", "Talking or writing", "Between people"),
            "Social",
        ),
        _entry(
            "transportation",
            "Ways of moving from place to place",
            ("Moving around", "Cars and buses", "Getting places"),
            "Travel",
        ),
        _entry(
            "organization",
            "Arranging things in an orderly way",
            ("Keeping things neat", "In order", "Well arranged"),
            "Skills",
        ),
        _entry(
            "opportunity",
            "A chance to do something good",
            ("A chance", "Good timing", "Don't miss it"),
            "Life",
        ),
        _entry(
            "personality",
            "The qualities that make you unique",
            ("What makes you special", "Your character", "How you act"),
            "Psychology",
        ),
    ),
    Tier.DIFFICULT: (
        _entry(
            "pharmaceutical",
            "Related to the preparation of medicines",
            ("About medicines", "Drug companies", "Medical field"),
            "Medicine",
        ),
        _entry(
            "entrepreneurship",
            "The activity of starting and running businesses",
            ("Starting businesses", "Taking risks", "Innovation"),
            "Business",
        ),
        _entry(
            "metamorphosis",
            "A complete change in form or nature",
            ("Complete change", "Caterpillar to butterfly", "Transformation"),
            "Science",
        ),
        _entry(
            "conscientious",
            "Careful and thorough in work or duties",
            ("Very careful", "Thorough worker", "Takes responsibility"),
            "Character",
        ),
        _entry(
            "serendipity",
            "A pleasant surprise or fortunate accident",
            ("Happy accident", "Unexpected good luck", "Pleasant surprise"),
            "Concepts",
        ),
        _entry(
            "onomatopoeia",
            "Words that imitate sounds they represent",
            ("Sound words", "Like buzz or crash", "Imitates sounds"),
            "Language",
        ),
        _entry(
            "procrastination",
            "The habit of delaying or postponing tasks",
            ("Putting things off", "Delaying work", "Bad habit"),
            "Behavior",
        ),
        _entry(
            "perspicacious",
            "Having keen insight and understanding",
            ("Very insightful", "Sharp mind", "Good judgment"),
            "Intelligence",
        ),
        _entry(
            "quintessential",
            "Representing the most perfect example",
            ("Perfect example", "Most typical", "Best representation"),
            "Quality",
        ),
        _entry(
            "juxtaposition",
            "Placing things side by side for comparison",
            ("Side by side", "For comparison", "Contrasting placement"),
            "Art",
        ),
        _entry(
            "sophisticated",
            "Complex and refined in design",
            ("Very refined", "Complex design", "Elegant and advanced"),
            "Quality",
        ),
        _entry(
            "extraordinary",
            "Very unusual or remarkable",
            ("Very unusual", "Remarkable", "Beyond ordinary"),
            "Quality",
        ),
        _entry(
            "philosophical",
            "Related to the study of fundamental questions",
            ("Deep thinking", "About life questions", "Wisdom seeking"),
            "Thinking",
        ),
        _entry(
            "psychological",
            "Related to the mind and behavior",
            ("About the mind", "Mental processes", "How we think"),
            "Psychology",
        ),
        _entry(
            "technological",
            "Related to technology and innovation",
            ("About technology", "Modern devices", "Innovation"),
            "Technology",
        ),
        _entry(
            "international",
            "Between or among different countries",
            ("Between countries", "Global", "Worldwide"),
            "Geography",
        ),
        _entry(
            "environmental",
            "Related to the natural surroundings",
            ("About nature", "Surroundings", "Ecology"),
            "Nature",
        ),
        _entry(
            "constitutional",
            "Related to a constitution or basic laws",
            ("About basic laws", "Government rules", "Legal foundation"),
            "Law",
        ),
        _entry(
            "revolutionary",
            "Involving a complete change",
            ("Complete change", "Major transformation", "Groundbreaking"),
            "Change",
        ),
        _entry(
            "incomprehensible",
            "Impossible to understand",
            ("Can't understand", "Too complex", "Beyond comprehension"),
            "Understanding",
        ),
    ),
    Tier.EXTREME: (
        _entry(
            "antidisestablishmentarianism",
            "Opposition to the withdrawal of state support from an established church",
            ("Very long word", "About church and state", "Political opposition"),
            "Politics",
        ),
        _entry(
            "pneumonoultramicroscopicsilicovolcanoconosis",
            "A lung disease caused by inhaling very fine silicate or quartz dust",
            ("Lung disease", "From dust", "Very long medical term"),
            "Medicine",
        ),
        _entry(
            "floccinaucinihilipilification",
            "The action of estimating something as worthless",
            ("Considering worthless", "Very long word", "About value"),
            "Concepts",
        ),
        _entry(
            "hippopotomonstrosesquippedaliophobia",
            "Fear of long words",
            ("Fear of long words", "Ironic name", "Phobia"),
            "Psychology",
        ),
        _entry(
            "supercalifragilisticexpialidocious",
            "Extraordinarily good or wonderful",
            ("From Mary Poppins", "Means wonderful", "Made-up word"),
            "Entertainment",
        ),
        _entry(
            "pseudopseudohypoparathyroidism",
            "A rare genetic disorder",
            ("Genetic disorder", "Medical condition", "Very rare"),
            "Medicine",
        ),
        _entry(
            "thyroparathyroidectomized",
            "Having had thyroid and parathyroid glands removed",
            ("Medical procedure", "Gland removal", "Surgery term"),
            "Medicine",
        ),
        _entry(
            "spectrophotofluorometrically",
            "In a manner relating to spectrophotofluorometry",
            ("Scientific method", "Laboratory technique", "Measurement"),
            "Science",
        ),
        _entry(
            "electroencephalographically",
            "In a manner relating to brain wave recording",
            ("Brain waves", "Medical recording", "Neurological"),
            "Medicine",
        ),
        _entry(
            "immunoelectrophoretically",
            "Using a technique to separate proteins",
            ("Laboratory technique", "Protein separation", "Scientific method"),
            "Science",
        ),
        _entry(
            "psychopharmacologically",
            "Relating to drugs that affect the mind",
            ("Mind-affecting drugs", "Psychiatric medicine", "Brain chemistry"),
            "Medicine",
        ),
        _entry(
            "radioimmunoelectrophoresis",
            "A laboratory technique using radioactive markers",
            ("Lab technique", "Uses radiation", "Scientific analysis"),
            "Science",
        ),
        _entry(
            "pneumoencephalographically",
            "Relating to X-ray imaging of the brain",
            ("Brain imaging", "X-ray technique", "Medical procedure"),
            "Medicine",
        ),
        _entry(
            "tetraiodophenolphthalein",
            "A chemical compound used in medicine",
            ("Chemical compound", "Medical use", "Complex molecule"),
            "Chemistry",
        ),
        _entry(
            "hepaticocholangiogastrostomy",
            "A surgical procedure connecting liver ducts",
            ("Surgery procedure", "Liver operation", "Medical term"),
            "Medicine",
        ),
        _entry(
            "pneumonoultramicroscopicsilicovolcanoconiosis",
            "Alternative spelling of the lung disease",
            ("Lung disease", "From silica dust", "Longest word"),
            "Medicine",
        ),
        _entry(
            "otorhinolaryngological",
            "Relating to ear, nose, and throat medicine",
            ("ENT medicine", "Ear, nose, throat", "Medical specialty"),
            "Medicine",
        ),
        _entry(
            "esophagogastroduodenoscopy",
            "A procedure to examine the upper digestive tract",
            ("Digestive examination", "Medical procedure", "Upper GI tract"),
            "Medicine",
        ),
        _entry(
            "electrocardiographically",
            "Relating to heart rhythm recording",
            ("Heart rhythm", "Medical recording", "EKG related"),
            "Medicine",
        ),
        _entry(
            "magnetohydrodynamically",
            "Relating to electrically conducting fluids in magnetic fields",
            ("Physics concept", "Magnetic fields", "Conducting fluids"),
            "Physics",
        ),
    ),
}


def entries_for(tier: Tier) -> tuple[WordEntry, ...]:
    return WORD_CATALOG[tier]
